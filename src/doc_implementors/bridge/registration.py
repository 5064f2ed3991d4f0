# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Producer-side registration entry points."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ..catalog.builder import build_catalog
from ..catalog.loader import CatalogLoader, PayloadFormat
from ..catalog.model_catalog import ImplementorCatalog
from ..catalog.types import JSONValue
from .context import RegistrationContext, RegistrationOutcome

LOGGER = logging.getLogger(__name__)

DEFAULT_CONTEXT = RegistrationContext()


def register_implementors(
    catalog: ImplementorCatalog,
    *,
    context: RegistrationContext | None = None,
) -> RegistrationOutcome:
    """Hand ``catalog`` to the consumer, or buffer it until one binds.

    Each call is independent: the hook runs once per call, and without a hook
    the pending slot is overwritten rather than merged.

    Args:
        catalog: Catalog to register.
        context: Registration context; defaults to :data:`DEFAULT_CONTEXT`.

    Returns:
        RegistrationOutcome: Whether the catalog was delivered or left pending.
    """

    target = DEFAULT_CONTEXT if context is None else context
    return target.offer(catalog)


def register_literal(
    literal: Mapping[str, JSONValue],
    *,
    context: RegistrationContext | None = None,
) -> RegistrationOutcome:
    """Build the catalog embedded in ``literal`` and register it.

    Args:
        literal: Generator literal shaped ``{library: [descriptor, ...]}``.
        context: Registration context; defaults to :data:`DEFAULT_CONTEXT`.

    Returns:
        RegistrationOutcome: Whether the catalog was delivered or left pending.
    """

    return register_implementors(build_catalog(literal), context=context)


def load_payload(
    path: Path,
    *,
    context: RegistrationContext | None = None,
    loader: CatalogLoader | None = None,
    payload_format: PayloadFormat | None = None,
) -> RegistrationOutcome:
    """Load the payload stored at ``path`` and register its catalog once.

    Args:
        path: JSON document or payload script.
        context: Registration context; defaults to :data:`DEFAULT_CONTEXT`.
        loader: Loader used to read and validate the payload.
        payload_format: Explicit wire form; inferred from the suffix when omitted.

    Returns:
        RegistrationOutcome: Whether the catalog was delivered or left pending.
    """

    active_loader = loader or CatalogLoader()
    catalog = active_loader.load_catalog(path, payload_format=payload_format)
    outcome = register_implementors(catalog, context=context)
    LOGGER.debug("%s: %d libraries %s", path, len(catalog), outcome.value)
    return outcome


__all__ = ["DEFAULT_CONTEXT", "load_payload", "register_implementors", "register_literal"]
