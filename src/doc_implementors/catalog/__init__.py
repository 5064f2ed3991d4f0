# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the implementor catalog."""

from __future__ import annotations

from typing import Final

from .builder import build_catalog
from .errors import CatalogIntegrityError, CatalogValidationError
from .io import dump_document, load_document
from .loader import CatalogLoader, PayloadFormat
from .model_catalog import ImplementorCatalog
from .model_descriptor import ImplementorDescriptor
from .script import load_payload_script, parse_payload_script, render_payload_script

__all__: Final[tuple[str, ...]] = (
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogValidationError",
    "ImplementorCatalog",
    "ImplementorDescriptor",
    "PayloadFormat",
    "build_catalog",
    "dump_document",
    "load_document",
    "load_payload_script",
    "parse_payload_script",
    "render_payload_script",
)
