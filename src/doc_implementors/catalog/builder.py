# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Construct implementor catalogs from embedded data literals."""

from __future__ import annotations

from collections.abc import Mapping

from .model_catalog import ImplementorCatalog
from .model_descriptor import ImplementorDescriptor
from .types import JSONValue
from .utils import expect_mapping, expect_sequence


def build_catalog(literal: Mapping[str, JSONValue], *, context: str = "<literal>") -> ImplementorCatalog:
    """Build an :class:`ImplementorCatalog` from a generator literal.

    The literal is shaped ``{library: [{"text", "synthetic", "types"}, ...]}``.
    Construction performs no I/O and preserves library and descriptor order.

    Args:
        literal: Mapping of library names to descriptor mappings.
        context: Human-readable prefix used in error messages.

    Returns:
        ImplementorCatalog: Immutable catalog equal to ``literal``.

    Raises:
        CatalogIntegrityError: If ``literal`` is not shaped like a catalog.
    """

    root = expect_mapping(literal, key="<root>", context=context)
    entries: list[tuple[str, tuple[ImplementorDescriptor, ...]]] = []
    for library, raw_items in root.items():
        library_context = f"{context}[{library!r}]"
        items = expect_sequence(raw_items, key=library, context=context)
        descriptors = tuple(
            ImplementorDescriptor.from_mapping(
                expect_mapping(raw, key=f"{library}[{index}]", context=context),
                context=f"{library_context}[{index}]",
            )
            for index, raw in enumerate(items)
        )
        entries.append((library, descriptors))
    return ImplementorCatalog(entries)


__all__ = ["build_catalog"]
