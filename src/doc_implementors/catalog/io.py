# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading and writing catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import CatalogIntegrityError
from .model_catalog import ImplementorCatalog
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:  # pragma: no cover - json module provides rich context
            raise CatalogIntegrityError(f"{path}: failed to parse JSON schema") from exc
    return _ensure_json_object(payload, context=str(path))


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a catalog JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed catalog literal with key order preserved.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogIntegrityError: If the document cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return parse_document(path.read_text(encoding="utf-8"), context=str(path))


def parse_document(text: str, *, context: str) -> Mapping[str, JSONValue]:
    """Parse catalog JSON ``text``.

    Args:
        text: JSON document contents.
        context: Human-readable context string used in error messages.

    Returns:
        Mapping[str, JSONValue]: Parsed catalog literal.

    Raises:
        CatalogIntegrityError: If ``text`` is not a JSON object.
    """
    try:
        payload = cast(JSONValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise CatalogIntegrityError(f"{context}: failed to parse catalog JSON") from exc
    return _ensure_json_object(payload, context=context)


def dump_document(catalog: ImplementorCatalog, path: Path | None = None, *, indent: int | None = 2) -> str:
    """Serialise ``catalog`` as a JSON document.

    Args:
        catalog: Catalog to serialise.
        path: Optional destination written with UTF-8 encoding.
        indent: Indentation forwarded to :func:`json.dumps`; ``None`` for compact output.

    Returns:
        str: The JSON text that was produced.
    """
    separators = (",", ":") if indent is None else None
    text = json.dumps(catalog.to_dict(), indent=indent, separators=separators, ensure_ascii=False)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
    return text


__all__ = ["dump_document", "load_document", "load_schema", "parse_document"]


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Ensure ``value`` is a JSON object, raising on type mismatch.

    Args:
        value: Parsed JSON payload to validate.
        context: Human-readable context string used in error messages.

    Returns:
        Mapping[str, JSONValue]: Validated JSON object.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """

    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected a JSON object")
    return value
