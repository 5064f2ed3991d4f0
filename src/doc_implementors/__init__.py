# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Trait implementor catalogs and their load-order independent registration."""

from __future__ import annotations

from .bridge import (
    DEFAULT_CONTEXT,
    BridgeState,
    ConsumerHook,
    RegistrationContext,
    RegistrationOutcome,
    load_payload,
    register_implementors,
    register_literal,
)
from .catalog import (
    CatalogIntegrityError,
    CatalogLoader,
    CatalogValidationError,
    ImplementorCatalog,
    ImplementorDescriptor,
    PayloadFormat,
    build_catalog,
    render_payload_script,
)
from .config import CatalogConfig, ConfigError, load_config

__all__ = [
    "BridgeState",
    "CatalogConfig",
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogValidationError",
    "ConfigError",
    "ConsumerHook",
    "DEFAULT_CONTEXT",
    "ImplementorCatalog",
    "ImplementorDescriptor",
    "PayloadFormat",
    "RegistrationContext",
    "RegistrationOutcome",
    "build_catalog",
    "load_config",
    "load_payload",
    "register_implementors",
    "register_literal",
    "render_payload_script",
]
