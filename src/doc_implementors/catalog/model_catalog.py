# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate mapping library names to their implementors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from .checksum import compute_catalog_checksum
from .model_descriptor import ImplementorDescriptor
from .types import JSONValue


class ImplementorCatalog(Mapping[str, tuple[ImplementorDescriptor, ...]]):
    """Read-only mapping from library name to its ordered implementor descriptors.

    Library order and per-library descriptor order are the declaration order of
    the source literal. Nothing is re-sorted.
    """

    __slots__ = ("_entries", "_checksum")

    def __init__(
        self,
        entries: Mapping[str, Sequence[ImplementorDescriptor]]
        | Iterable[tuple[str, Sequence[ImplementorDescriptor]]] = (),
    ) -> None:
        """Freeze ``entries`` into the catalog.

        Args:
            entries: Mapping or pairs of library name and descriptors. A repeated
                library name replaces the earlier entry.
        """

        pairs = entries.items() if isinstance(entries, Mapping) else entries
        frozen: dict[str, tuple[ImplementorDescriptor, ...]] = {}
        for library, descriptors in pairs:
            frozen[library] = tuple(descriptors)
        self._entries: Mapping[str, tuple[ImplementorDescriptor, ...]] = MappingProxyType(frozen)
        self._checksum: str | None = None

    def __getitem__(self, library: str) -> tuple[ImplementorDescriptor, ...]:
        return self._entries[library]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        summary = ", ".join(f"{library}={len(items)}" for library, items in self._entries.items())
        return f"ImplementorCatalog({summary})"

    @property
    def libraries(self) -> tuple[str, ...]:
        """Return library names in declaration order."""

        return tuple(self._entries)

    @property
    def checksum(self) -> str:
        """Return the deterministic checksum of the catalog contents."""

        if self._checksum is None:
            self._checksum = compute_catalog_checksum(self.to_dict())
        return self._checksum

    def descriptors(self) -> Iterator[tuple[str, ImplementorDescriptor]]:
        """Yield ``(library, descriptor)`` pairs across the whole catalog in order."""

        for library, items in self._entries.items():
            for descriptor in items:
                yield library, descriptor

    def to_dict(self) -> dict[str, list[dict[str, JSONValue]]]:
        """Return the plain JSON literal equivalent to this catalog.

        Returns:
            dict[str, list[dict[str, JSONValue]]]: Literal that rebuilds an equal catalog.
        """

        return {library: [item.to_dict() for item in items] for library, items in self._entries.items()}


__all__ = ["ImplementorCatalog"]
