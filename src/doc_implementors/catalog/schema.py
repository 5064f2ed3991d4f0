# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, cast, runtime_checkable

from .io import load_schema
from .types import JSONValue

CATALOG_SCHEMA_FILENAME: Final[str] = "implementors.schema.json"
DEFAULT_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schema"


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def validate(self, instance: JSONValue) -> None:
        """Validate ``instance`` against the bound schema.

        Args:
            instance: JSON payload to validate against the schema.

        Raises:
            Exception: Implementations raise jsonschema validation errors when invalid.
        """


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]


jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the catalog JSON schema validator."""

    schema_root: Path
    catalog_validator: SchemaValidator

    @classmethod
    def load(cls, *, schema_root: Path | None = None) -> SchemaRepository:
        """Load the catalog schema validator from disk.

        Args:
            schema_root: Optional override for the schema directory. Defaults to
                the schema bundled with the package.

        Returns:
            SchemaRepository: Repository configured with the catalog validator.
        """
        resolved_root = schema_root or DEFAULT_SCHEMA_ROOT
        schema = load_schema(resolved_root / CATALOG_SCHEMA_FILENAME)
        return cls(
            schema_root=resolved_root,
            catalog_validator=Draft202012Validator(schema),
        )


__all__ = ["CATALOG_SCHEMA_FILENAME", "DEFAULT_SCHEMA_ROOT", "SchemaRepository"]
