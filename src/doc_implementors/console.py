# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the CLI and the reporting helpers."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from .config import CatalogConfig


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Hand out one console per colour/emoji/TTY combination.

    Consoles are created without a file so they always write to the current
    ``sys.stdout``, which keeps them usable under ``CliRunner``.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for ``color`` and ``emoji``.

        Args:
            color: ``True`` when ANSI colour output should be enabled on a TTY.
            emoji: ``True`` when Rich should render emoji codes.

        Returns:
            Console: Cached console matching the preferences.
        """

        tty = detect_tty()
        key = (color, emoji, tty)
        console = self._cache.get(key)
        if console is None:
            console = Console(
                color_system="auto" if color and tty else None,
                force_terminal=tty,
                no_color=not (color and tty),
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._cache[key] = console
        return console

    def for_config(self, config: CatalogConfig) -> Console:
        """Return the console matching the presentation flags in ``config``."""

        return self.get(color=config.color, emoji=config.emoji)


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide console manager."""

    return RichConsoleManager()


__all__ = ["RichConsoleManager", "detect_tty", "get_console_manager"]
