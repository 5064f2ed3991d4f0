# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for doc-implementors."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .bridge.plugins import CONSUMER_GROUP

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[str] = "doc-implementors"
DEFAULT_TRAIT: Final[str] = "core::iter::traits::iterator::Iterator"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogConfig(BaseModel):
    """Settings that govern loading, registering and presenting catalogs."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    trait: str = DEFAULT_TRAIT
    consumer_group: str = CONSUMER_GROUP
    consumer: str | None = None
    validate_schema: bool = True
    schema_root: Path | None = None
    emoji: bool = True
    color: bool = True
    payload_dir: Path = Field(default_factory=lambda: Path("implementors"))

    @field_validator("trait", "consumer_group")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def trait_name(self) -> str:
        """Return the unqualified trait name."""

        return self.trait.rsplit("::", 1)[-1]

    def payload_path(self) -> Path:
        """Return the generator's payload script location for :attr:`trait`.

        Returns:
            Path: ``<payload_dir>/<module path>/trait.<Name>.js``.
        """

        segments = self.trait.split("::")
        return self.payload_dir.joinpath(*segments[:-1], f"trait.{segments[-1]}.js")


def load_config(root: Path, *, overrides: Mapping[str, Any] | None = None) -> CatalogConfig:
    """Load configuration from ``[tool.doc-implementors]`` under ``root``.

    Args:
        root: Project directory that may contain ``pyproject.toml``.
        overrides: Values applied on top of the file settings.

    Returns:
        CatalogConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be parsed or contains invalid settings.
    """

    data: dict[str, Any] = dict(_read_tool_section(root / PYPROJECT_FILENAME))
    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})
    normalised = {key.replace("-", "_"): value for key, value in data.items()}
    try:
        config = CatalogConfig.model_validate(normalised)
    except ValidationError as exc:
        raise ConfigError(f"invalid [tool.{TOOL_SECTION}] configuration: {exc}") from exc
    if not config.payload_dir.is_absolute():
        config.payload_dir = root / config.payload_dir
    if config.schema_root is not None and not config.schema_root.is_absolute():
        config.schema_root = root / config.schema_root
    return config


def _read_tool_section(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"failed to parse {path}: {exc}") from exc
    section = document.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{TOOL_SECTION}] in {path} must be a table")
    return section


__all__ = ["CatalogConfig", "ConfigError", "DEFAULT_TRAIT", "load_config"]
