# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Behavioural tests for the registration bridge."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from doc_implementors.bridge import (
    DEFAULT_CONTEXT,
    BridgeState,
    RegistrationContext,
    RegistrationOutcome,
    load_payload,
    register_implementors,
    register_literal,
)
from doc_implementors.catalog import ImplementorCatalog, build_catalog
from doc_implementors.catalog.types import JSONValue


class RecordingHook:
    """Consumer hook that remembers every catalog it receives."""

    def __init__(self) -> None:
        self.calls: list[ImplementorCatalog] = []

    def __call__(self, catalog: ImplementorCatalog) -> None:
        self.calls.append(catalog)


def test_bound_context_invokes_hook_once_with_equal_catalog(mylib_literal: dict[str, JSONValue]) -> None:
    hook = RecordingHook()
    context = RegistrationContext(hook=hook)

    outcome = register_literal(mylib_literal, context=context)

    assert outcome is RegistrationOutcome.DELIVERED
    assert len(hook.calls) == 1
    assert hook.calls[0].to_dict() == {
        "mylib": [{"text": "impl Iterator for Foo", "synthetic": False, "types": ["mylib", "Foo"]}],
    }
    assert context.pending is None


def test_unbound_context_buffers_catalog(
    context: RegistrationContext,
    mylib_literal: dict[str, JSONValue],
) -> None:
    catalog = build_catalog(mylib_literal)

    outcome = register_implementors(catalog, context=context)

    assert outcome is RegistrationOutcome.PENDING
    assert context.state is BridgeState.UNBOUND
    assert context.pending is catalog
    assert context.pending.to_dict() == mylib_literal


def test_pending_slot_is_overwritten_not_merged(context: RegistrationContext) -> None:
    lib_a = build_catalog({"libA": [{"text": "impl Iterator for A", "synthetic": False, "types": ["libA::A"]}]})
    lib_b = build_catalog({"libB": [{"text": "impl Iterator for B", "synthetic": False, "types": ["libB::B"]}]})

    register_implementors(lib_a, context=context)
    register_implementors(lib_b, context=context)

    assert context.pending is lib_b
    assert context.pending.libraries == ("libB",)


def test_bound_context_delivers_same_key_registrations_separately() -> None:
    hook = RecordingHook()
    context = RegistrationContext(hook=hook)
    first = build_catalog({"lib": [{"text": "one", "synthetic": False, "types": ["lib::One"]}]})
    second = build_catalog({"lib": [{"text": "two", "synthetic": False, "types": ["lib::Two"]}]})

    register_implementors(first, context=context)
    register_implementors(second, context=context)

    assert hook.calls == [first, second]
    assert context.pending is None


def test_bind_drains_pending_catalog_once(context: RegistrationContext, mylib_literal: dict[str, JSONValue]) -> None:
    register_literal(mylib_literal, context=context)
    hook = RecordingHook()

    drained = context.bind(hook)

    assert context.state is BridgeState.BOUND
    assert drained is not None
    assert hook.calls == [drained]
    assert context.pending is None
    assert context.bind(hook) is None
    assert len(hook.calls) == 1


def test_take_pending_clears_slot(context: RegistrationContext, mylib_literal: dict[str, JSONValue]) -> None:
    register_literal(mylib_literal, context=context)

    taken = context.take_pending()

    assert taken is not None and taken.libraries == ("mylib",)
    assert context.take_pending() is None


def test_unbind_returns_to_buffering(mylib_literal: dict[str, JSONValue]) -> None:
    hook = RecordingHook()
    context = RegistrationContext(hook=hook)

    assert context.unbind() is hook
    assert register_literal(mylib_literal, context=context) is RegistrationOutcome.PENDING
    assert hook.calls == []


def test_bind_rejects_non_callable(context: RegistrationContext) -> None:
    with pytest.raises(TypeError):
        context.bind("register_implementors")  # type: ignore[arg-type]
    assert context.state is BridgeState.UNBOUND


def test_constructor_rejects_non_callable_hook() -> None:
    with pytest.raises(TypeError, match="must be callable"):
        RegistrationContext(hook="register_implementors")  # type: ignore[arg-type]


def test_failing_hook_keeps_pending_catalog(
    context: RegistrationContext,
    mylib_literal: dict[str, JSONValue],
) -> None:
    register_literal(mylib_literal, context=context)
    pending = context.pending

    def broken(_: ImplementorCatalog) -> None:
        raise RuntimeError("viewer not ready")

    with pytest.raises(RuntimeError, match="viewer not ready"):
        context.bind(broken)

    assert context.pending is pending
    assert context.state is BridgeState.BOUND

    hook = RecordingHook()
    assert context.bind(hook) is pending
    assert hook.calls == [pending]
    assert context.pending is None


def test_hook_errors_propagate(mylib_literal: dict[str, JSONValue]) -> None:
    def broken(_: ImplementorCatalog) -> None:
        raise RuntimeError("viewer exploded")

    context = RegistrationContext(hook=broken)

    with pytest.raises(RuntimeError, match="viewer exploded"):
        register_literal(mylib_literal, context=context)
    assert context.pending is None


def test_default_context_is_used_when_none_given(mylib_literal: dict[str, JSONValue]) -> None:
    outcome = register_literal(mylib_literal)

    assert outcome is RegistrationOutcome.PENDING
    assert DEFAULT_CONTEXT.pending is not None
    assert DEFAULT_CONTEXT.pending.to_dict() == mylib_literal


def test_load_payload_registers_script(payload_script_path: Path) -> None:
    hook = RecordingHook()
    context = RegistrationContext(hook=hook)

    outcome = load_payload(payload_script_path, context=context)

    assert outcome is RegistrationOutcome.DELIVERED
    assert [catalog.libraries for catalog in hook.calls] == [("mylib", "otherlib")]


def test_bridge_logs_buffering(
    caplog: pytest.LogCaptureFixture,
    context: RegistrationContext,
    mylib_literal: dict[str, JSONValue],
) -> None:
    caplog.set_level(logging.DEBUG, logger="doc_implementors.bridge")

    register_literal(mylib_literal, context=context)
    register_literal(mylib_literal, context=context)

    messages = [record.getMessage() for record in caplog.records]
    assert "buffered implementors for mylib until a consumer binds" in messages
    assert "replacing pending implementors for mylib" in messages
