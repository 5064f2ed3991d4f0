# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the implementor catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

TEXT_KEY: Final[str] = "text"
SYNTHETIC_KEY: Final[str] = "synthetic"
TYPES_KEY: Final[str] = "types"

PATH_SEPARATOR: Final[str] = "::"

__all__ = [
    "PATH_SEPARATOR",
    "SYNTHETIC_KEY",
    "TEXT_KEY",
    "TYPES_KEY",
    "JSONPrimitive",
    "JSONValue",
]
