# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registration context shared by catalog producers and their consumer."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from ..catalog.model_catalog import ImplementorCatalog

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class ConsumerHook(Protocol):
    """Callable that accepts a catalog for rendering."""

    def __call__(self, catalog: ImplementorCatalog, /) -> object:
        """Receive ``catalog`` from a producer."""


class BridgeState(str, Enum):
    """Enumerate the registration bridge states."""

    UNBOUND = "unbound"
    BOUND = "bound"


class RegistrationOutcome(str, Enum):
    """Describe what happened to a registered catalog."""

    DELIVERED = "delivered"
    PENDING = "pending"


class RegistrationContext:
    """Hold the optional consumer hook and the pending catalog slot.

    Producers and the consumer receive the same context at startup. A producer
    that registers before the consumer binds leaves its catalog in the pending
    slot, where the most recent registration replaces any earlier one.
    """

    __slots__ = ("_hook", "_pending")

    def __init__(self, hook: ConsumerHook | None = None) -> None:
        """Create a context, bound when ``hook`` is supplied.

        Raises:
            TypeError: If ``hook`` is supplied but not callable.
        """

        if hook is not None and not callable(hook):
            raise TypeError(f"consumer hook must be callable, got {type(hook).__name__}")
        self._hook: ConsumerHook | None = hook
        self._pending: ImplementorCatalog | None = None

    @property
    def hook(self) -> ConsumerHook | None:
        """Return the bound consumer hook, if any."""

        return self._hook

    @property
    def pending(self) -> ImplementorCatalog | None:
        """Return the catalog waiting for a consumer, if any."""

        return self._pending

    @property
    def state(self) -> BridgeState:
        """Return whether a consumer hook is currently bound."""

        return BridgeState.UNBOUND if self._hook is None else BridgeState.BOUND

    def offer(self, catalog: ImplementorCatalog) -> RegistrationOutcome:
        """Deliver ``catalog`` to the hook or park it in the pending slot.

        Args:
            catalog: Catalog produced by a payload.

        Returns:
            RegistrationOutcome: ``DELIVERED`` when the hook ran, ``PENDING`` otherwise.
        """

        hook = self._hook
        if hook is not None:
            LOGGER.debug("delivering implementors for %s to %r", ", ".join(catalog) or "<empty>", hook)
            hook(catalog)
            return RegistrationOutcome.DELIVERED
        if self._pending is not None:
            LOGGER.debug("replacing pending implementors for %s", ", ".join(self._pending) or "<empty>")
        self._pending = catalog
        LOGGER.debug("buffered implementors for %s until a consumer binds", ", ".join(catalog) or "<empty>")
        return RegistrationOutcome.PENDING

    def bind(self, hook: ConsumerHook) -> ImplementorCatalog | None:
        """Bind ``hook`` as the consumer and hand it any pending catalog.

        Args:
            hook: Consumer callable that renders catalogs.

        The slot is cleared only once the hook returns. When the hook raises,
        the context stays bound and the catalog remains pending.

        Returns:
            ImplementorCatalog | None: The pending catalog that was delivered, if any.

        Raises:
            TypeError: If ``hook`` is not callable.
        """

        if not callable(hook):
            raise TypeError(f"consumer hook must be callable, got {type(hook).__name__}")
        self._hook = hook
        pending = self._pending
        if pending is None:
            return None
        LOGGER.debug("delivering pending implementors for %s to %r", ", ".join(pending) or "<empty>", hook)
        hook(pending)
        if self._pending is pending:
            self._pending = None
        return pending

    def unbind(self) -> ConsumerHook | None:
        """Detach the consumer hook and return it."""

        hook, self._hook = self._hook, None
        return hook

    def take_pending(self) -> ImplementorCatalog | None:
        """Return the pending catalog and clear the slot."""

        catalog, self._pending = self._pending, None
        return catalog

    def __repr__(self) -> str:
        return f"RegistrationContext(state={self.state.value}, pending={self._pending!r})"


__all__ = ["BridgeState", "ConsumerHook", "RegistrationContext", "RegistrationOutcome"]
