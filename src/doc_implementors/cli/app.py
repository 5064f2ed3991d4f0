# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, load_config
from ..logging import fail
from .commands import register_commands
from .shared import configure_logging

app = typer.Typer(
    name="doc-implementors",
    help="Inspect, convert and register trait implementor payloads.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[Path, typer.Option("--root", help="Project root holding pyproject.toml.")] = Path(),
    trait: Annotated[str | None, typer.Option("--trait", help="Fully-qualified trait path.")] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    no_schema: Annotated[bool, typer.Option("--no-schema", help="Skip JSON schema validation.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log bridge activity to stderr.")] = False,
) -> None:
    """Load configuration shared by every command."""

    configure_logging(verbose)
    overrides: dict[str, object] = {"trait": trait}
    if no_emoji:
        overrides["emoji"] = False
    if no_color:
        overrides["color"] = False
    if no_schema:
        overrides["validate_schema"] = False
    try:
        ctx.obj = load_config(root, overrides=overrides)
    except ConfigError as exc:
        fail(str(exc), use_emoji=not no_emoji, use_color=not no_color)
        raise typer.Exit(code=1) from exc


register_commands(app)

__all__ = ["app"]
