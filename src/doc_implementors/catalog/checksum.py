# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog contents."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping

from .types import JSONValue


def compute_catalog_checksum(literal: Mapping[str, JSONValue]) -> str:
    """Calculate the checksum for a catalog literal.

    Key order is significant, so two catalogs listing the same libraries in a
    different order produce different checksums.

    Args:
        literal: Plain JSON literal describing the catalog.

    Returns:
        str: Hex-encoded SHA-256 checksum of the compact JSON encoding.
    """
    hasher = hashlib.sha256()
    for library, items in literal.items():
        hasher.update(library.encode("utf-8"))
        hasher.update(b"\0")
        hasher.update(json.dumps(items, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))
        hasher.update(b"\0")
    return hasher.hexdigest()


__all__ = ["compute_catalog_checksum"]
