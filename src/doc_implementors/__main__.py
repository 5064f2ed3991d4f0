# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Module entry point for ``python -m doc_implementors``."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":
    app()
