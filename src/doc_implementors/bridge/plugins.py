# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry-point discovery of consumer hooks contributed by other distributions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from importlib import metadata
from typing import Final, cast

from .context import ConsumerHook

LOGGER = logging.getLogger(__name__)

CONSUMER_GROUP: Final[str] = "doc_implementors.consumers"


@dataclass(frozen=True, slots=True)
class DiscoveredConsumer:
    """Consumer hook paired with the entry point name that provided it."""

    name: str
    hook: ConsumerHook


def discover_consumers(
    group: str = CONSUMER_GROUP,
    *,
    entries: Iterable[metadata.EntryPoint] | None = None,
) -> tuple[DiscoveredConsumer, ...]:
    """Load consumer hooks registered under ``group``.

    Entry points that fail to import, or that resolve to something other than a
    callable, are skipped with a warning.

    Args:
        group: Entry point group to search.
        entries: Optional entry point overrides used for testing.

    Returns:
        tuple[DiscoveredConsumer, ...]: Consumers sorted by entry point name.
    """

    if entries is None:
        try:
            entries = metadata.entry_points().select(group=group)
        except metadata.PackageNotFoundError:  # pragma: no cover - metadata failure fallback
            return ()
    consumers: list[DiscoveredConsumer] = []
    for entry in sorted(entries, key=lambda item: item.name):
        try:
            loaded = entry.load()
        except (AttributeError, ImportError, ValueError) as exc:
            LOGGER.warning("skipping consumer '%s': %s", entry.name, exc)
            continue
        if not callable(loaded):
            LOGGER.warning("skipping consumer '%s': %r is not callable", entry.name, loaded)
            continue
        consumers.append(DiscoveredConsumer(name=entry.name, hook=cast(ConsumerHook, loaded)))
    return tuple(consumers)


def select_consumer(
    consumers: Iterable[DiscoveredConsumer],
    *,
    name: str | None = None,
) -> DiscoveredConsumer | None:
    """Pick the consumer to bind from ``consumers``.

    Args:
        consumers: Discovered consumers in priority order.
        name: Entry point name to select; the first consumer is used when omitted.

    Returns:
        DiscoveredConsumer | None: Selected consumer, or ``None`` when none is available.

    Raises:
        LookupError: If ``name`` does not match any discovered consumer.
    """

    candidates = tuple(consumers)
    if name is None:
        return candidates[0] if candidates else None
    for consumer in candidates:
        if consumer.name == name:
            return consumer
    raise LookupError(name)


__all__ = ["CONSUMER_GROUP", "DiscoveredConsumer", "discover_consumers", "select_consumer"]
