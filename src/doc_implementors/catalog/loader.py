# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises implementor catalogs from payload files."""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import cast

from .builder import build_catalog
from .errors import CatalogValidationError
from .io import parse_document
from .model_catalog import ImplementorCatalog
from .schema import SchemaRepository
from .script import parse_payload_script
from .types import JSONValue

jsonschema_module = importlib.import_module("jsonschema")
jsonschema_exceptions: ModuleType = cast(ModuleType, jsonschema_module.exceptions)
JsonSchemaValidationError = cast(type[Exception], getattr(jsonschema_exceptions, "ValidationError"))


class PayloadFormat(str, Enum):
    """Enumerate the wire forms an implementors payload may take."""

    JSON = "json"
    SCRIPT = "script"

    @classmethod
    def for_path(cls, path: Path) -> PayloadFormat:
        """Return the payload format implied by ``path``'s suffix.

        Args:
            path: Payload location on disk.

        Returns:
            PayloadFormat: ``SCRIPT`` for ``.js`` files, ``JSON`` otherwise.
        """

        return cls.SCRIPT if path.suffix.lower() == ".js" else cls.JSON


@dataclass(slots=True)
class CatalogLoader:
    """Loader that validates and materialises implementor catalogs."""

    schema_root: Path | None = None
    validate_schema: bool = True
    _schemas: SchemaRepository | None = field(default=None, init=False, repr=False)

    def load_literal(self, path: Path, *, payload_format: PayloadFormat | None = None) -> Mapping[str, JSONValue]:
        """Read the catalog literal stored at ``path``.

        Args:
            path: Payload location on disk.
            payload_format: Explicit wire form; inferred from the suffix when omitted.

        Returns:
            Mapping[str, JSONValue]: Validated catalog literal.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            CatalogIntegrityError: If the payload cannot be parsed.
            CatalogValidationError: If the literal fails schema validation.
        """

        if not path.exists():
            raise FileNotFoundError(path)
        text = path.read_text(encoding="utf-8")
        resolved_format = payload_format or PayloadFormat.for_path(path)
        if resolved_format is PayloadFormat.SCRIPT:
            literal: Mapping[str, JSONValue] = parse_payload_script(text, context=str(path))
        else:
            literal = parse_document(text, context=str(path))
        if self.validate_schema:
            self.validate(literal, source=str(path))
        return literal

    def load_catalog(self, path: Path, *, payload_format: PayloadFormat | None = None) -> ImplementorCatalog:
        """Load and build the catalog stored at ``path``.

        Args:
            path: Payload location on disk.
            payload_format: Explicit wire form; inferred from the suffix when omitted.

        Returns:
            ImplementorCatalog: Catalog built from the payload.
        """

        literal = self.load_literal(path, payload_format=payload_format)
        return build_catalog(literal, context=str(path))

    def validate(self, literal: Mapping[str, JSONValue], *, source: str) -> None:
        """Validate ``literal`` against the catalog schema.

        Args:
            literal: Catalog literal to validate.
            source: Location used in error reporting.

        Raises:
            CatalogValidationError: When the literal fails schema validation.
        """

        if self._schemas is None:
            self._schemas = SchemaRepository.load(schema_root=self.schema_root)
        try:
            self._schemas.catalog_validator.validate(literal)
        except JsonSchemaValidationError as exc:
            raise CatalogValidationError(f"{source}: {getattr(exc, 'message', exc)}") from exc


__all__ = ["CatalogLoader", "PayloadFormat"]
