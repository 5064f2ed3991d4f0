# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import inspect, register, render, validate

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``.

    Args:
        app: Typer application receiving command registrations.
    """

    inspect.register(app)
    validate.register(app)
    render.register(app)
    register.register(app)
