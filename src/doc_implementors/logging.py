# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting for catalog checks and registration results."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final

from rich.text import Text

from .bridge import RegistrationOutcome
from .catalog import ImplementorCatalog
from .console import detect_tty, get_console_manager


class Severity(str, Enum):
    """Enumerate the kinds of status line shown to users."""

    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


_BADGES: Final[MappingProxyType[Severity, tuple[str, str]]] = MappingProxyType(
    {
        Severity.OK: ("✅ ", "green"),
        Severity.WARN: ("⚠️ ", "yellow"),
        Severity.FAIL: ("❌ ", "red"),
    },
)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def report(severity: Severity, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` with the badge and colour associated with ``severity``.

    Args:
        severity: Kind of status line to print.
        msg: Message text.
        use_emoji: Flag indicating whether the emoji badge is shown.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    symbol, style = _BADGES[severity]
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(f"{emoji(symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    report(Severity.OK, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    report(Severity.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


def catalog_summary(catalog: ImplementorCatalog) -> str:
    """Return a one-line description of ``catalog`` including its checksum."""

    count = sum(len(items) for items in catalog.values())
    return f"{count} implementors, {len(catalog)} libraries, checksum {catalog.checksum}"


def report_registration(
    outcome: RegistrationOutcome,
    catalog: ImplementorCatalog,
    *,
    consumer: str | None,
    consumer_group: str,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Tell the user whether ``catalog`` reached a consumer or stayed pending.

    Args:
        outcome: Result returned by the registration bridge.
        catalog: Catalog that was registered.
        consumer: Entry point name of the bound consumer, if any.
        consumer_group: Entry point group that was searched.
        use_emoji: Flag indicating whether emoji badges are shown.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    if outcome is RegistrationOutcome.DELIVERED:
        report(
            Severity.OK,
            f"delivered {len(catalog)} libraries to consumer '{consumer}'",
            use_emoji=use_emoji,
            use_color=use_color,
        )
        return
    report(
        Severity.WARN,
        f"no consumer registered under '{consumer_group}'; catalog left pending",
        use_emoji=use_emoji,
        use_color=use_color,
    )


__all__ = [
    "Severity",
    "catalog_summary",
    "emoji",
    "fail",
    "ok",
    "report",
    "report_registration",
]
