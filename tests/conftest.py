# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from doc_implementors.bridge import DEFAULT_CONTEXT, RegistrationContext
from doc_implementors.catalog.types import JSONValue


@pytest.fixture
def data_root() -> Path:
    """Return the directory holding payload fixtures."""
    return Path(__file__).resolve().parent / "data"


@pytest.fixture
def payload_script_path(data_root: Path) -> Path:
    """Return the sample payload script with two libraries."""
    return data_root / "trait.Iterator.js"


@pytest.fixture
def mylib_literal() -> dict[str, JSONValue]:
    """Return the single-implementor literal used across bridge tests."""
    return {
        "mylib": [
            {"text": "impl Iterator for Foo", "synthetic": False, "types": ["mylib", "Foo"]},
        ],
    }


@pytest.fixture
def context() -> RegistrationContext:
    """Return a fresh, unbound registration context."""
    return RegistrationContext()


@pytest.fixture(autouse=True)
def _reset_default_context() -> Iterator[None]:
    """Keep the process-wide context clean between tests."""
    yield
    DEFAULT_CONTEXT.unbind()
    DEFAULT_CONTEXT.take_pending()
