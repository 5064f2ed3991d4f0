# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for entry-point consumer discovery."""

from __future__ import annotations

from importlib import metadata

import pytest

from doc_implementors.bridge import CONSUMER_GROUP, DiscoveredConsumer, discover_consumers, select_consumer


def _entry(name: str, value: str) -> metadata.EntryPoint:
    return metadata.EntryPoint(name=name, value=value, group=CONSUMER_GROUP)


def test_discover_loads_callables_sorted_by_name() -> None:
    consumers = discover_consumers(
        entries=[
            _entry("zviewer", "builtins:print"),
            _entry("aviewer", "builtins:len"),
        ],
    )

    assert [consumer.name for consumer in consumers] == ["aviewer", "zviewer"]
    assert consumers[0].hook is len


def test_discover_skips_broken_and_non_callable_entries(caplog: pytest.LogCaptureFixture) -> None:
    consumers = discover_consumers(
        entries=[
            _entry("missing", "doc_implementors_missing_module:hook"),
            _entry("constant", "doc_implementors.bridge.plugins:CONSUMER_GROUP"),
            _entry("viewer", "builtins:print"),
        ],
    )

    assert [consumer.name for consumer in consumers] == ["viewer"]
    assert any("skipping consumer 'missing'" in record.getMessage() for record in caplog.records)
    assert any("skipping consumer 'constant'" in record.getMessage() for record in caplog.records)


def test_discover_without_installed_consumers_returns_empty() -> None:
    assert discover_consumers("doc_implementors.tests.no_such_group") == ()


def test_select_consumer() -> None:
    first = DiscoveredConsumer(name="first", hook=print)
    second = DiscoveredConsumer(name="second", hook=len)

    assert select_consumer([]) is None
    assert select_consumer([first, second]) is first
    assert select_consumer([first, second], name="second") is second
    with pytest.raises(LookupError):
        select_consumer([first], name="third")
