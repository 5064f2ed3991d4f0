# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Implementor descriptor model shared by the catalog and the registration bridge."""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .errors import CatalogIntegrityError
from .types import PATH_SEPARATOR, SYNTHETIC_KEY, TEXT_KEY, TYPES_KEY, JSONValue
from .utils import expect_bool, expect_string, string_array

_MARKUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^>]*>")


@dataclass(frozen=True, slots=True)
class ImplementorDescriptor:
    """Describe one implementation of the documented trait.

    Attributes:
        display_text: Formatted impl signature as emitted by the generator. The
            value is an HTML fragment and is kept verbatim.
        is_synthetic: ``True`` for compiler-synthesised impls such as auto traits.
        type_identifier_path: Fully-qualified identifiers of the implementing type
            used for cross-referencing. Never empty.
    """

    display_text: str
    is_synthetic: bool
    type_identifier_path: tuple[str, ...]

    def __post_init__(self) -> None:
        """Reject descriptors without a usable type identifier path."""

        if not self.type_identifier_path:
            raise CatalogIntegrityError(
                f"implementor '{self.display_text}' must declare at least one type identifier",
            )
        if not all(self.type_identifier_path):
            raise CatalogIntegrityError(
                f"implementor '{self.display_text}' has an empty type identifier",
            )

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> ImplementorDescriptor:
        """Create a descriptor from its wire mapping.

        Args:
            data: Mapping with the ``text``, ``synthetic`` and ``types`` keys.
            context: Human-readable context used in error messages.

        Returns:
            ImplementorDescriptor: Frozen descriptor mirroring ``data``.

        Raises:
            CatalogIntegrityError: If a field is missing, mistyped, or the type
                path or one of its identifiers is empty.
        """

        display_text = expect_string(data.get(TEXT_KEY), key=TEXT_KEY, context=context)
        is_synthetic = expect_bool(data.get(SYNTHETIC_KEY), key=SYNTHETIC_KEY, context=context)
        type_path = string_array(data.get(TYPES_KEY), key=TYPES_KEY, context=context)
        if not type_path:
            raise CatalogIntegrityError(f"{context}: expected '{TYPES_KEY}' to be a non-empty array")
        for index, identifier in enumerate(type_path):
            if not identifier:
                raise CatalogIntegrityError(f"{context}: expected '{TYPES_KEY}[{index}]' to be a non-empty string")
        return ImplementorDescriptor(
            display_text=display_text,
            is_synthetic=is_synthetic,
            type_identifier_path=type_path,
        )

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the wire mapping for this descriptor.

        Returns:
            dict[str, JSONValue]: Mapping using the generator's key order.
        """

        return {
            TEXT_KEY: self.display_text,
            SYNTHETIC_KEY: self.is_synthetic,
            TYPES_KEY: list(self.type_identifier_path),
        }

    @property
    def plain_text(self) -> str:
        """Return the display text with markup stripped and entities decoded."""

        return html.unescape(_MARKUP_PATTERN.sub("", self.display_text))

    @property
    def qualified_name(self) -> str:
        """Return the type identifier path joined into one ``::`` separated name."""

        return PATH_SEPARATOR.join(self.type_identifier_path)

    @property
    def type_name(self) -> str:
        """Return the unqualified name of the implementing type."""

        return self.qualified_name.rsplit(PATH_SEPARATOR, 1)[-1]

    @property
    def crate_name(self) -> str:
        """Return the leading path segment naming the defining crate."""

        return self.qualified_name.split(PATH_SEPARATOR, 1)[0]


__all__ = ["ImplementorDescriptor"]
