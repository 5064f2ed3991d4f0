# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load-order independent handoff of catalogs to their consumer."""

from __future__ import annotations

from .context import BridgeState, ConsumerHook, RegistrationContext, RegistrationOutcome
from .plugins import CONSUMER_GROUP, DiscoveredConsumer, discover_consumers, select_consumer
from .registration import DEFAULT_CONTEXT, load_payload, register_implementors, register_literal

__all__ = [
    "BridgeState",
    "CONSUMER_GROUP",
    "ConsumerHook",
    "DEFAULT_CONTEXT",
    "DiscoveredConsumer",
    "RegistrationContext",
    "RegistrationOutcome",
    "discover_consumers",
    "load_payload",
    "register_implementors",
    "register_literal",
    "select_consumer",
]
