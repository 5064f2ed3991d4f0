# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising catalog JSON structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogIntegrityError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The validated string value.

    Raises:
        CatalogIntegrityError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string")
    return value


def expect_bool(value: JSONValue | None, *, key: str, context: str) -> bool:
    """Return ``value`` as ``bool`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        bool: The validated boolean value.

    Raises:
        CatalogIntegrityError: If ``value`` is not a boolean.
    """
    if not isinstance(value, bool):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a boolean")
    return value


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value`` in order.

    Raises:
        CatalogIntegrityError: If ``value`` is not a sequence of strings.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


def expect_sequence(value: JSONValue | None, *, key: str, context: str) -> Sequence[JSONValue]:
    """Return ``value`` as a JSON array or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Sequence[JSONValue]: Sequence derived from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not an array.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array")
    return value


__all__ = [
    "expect_bool",
    "expect_mapping",
    "expect_sequence",
    "expect_string",
    "string_array",
]
