# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tabulate the implementors stored in a payload."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...catalog import ImplementorCatalog
from ...config import CatalogConfig
from ...console import get_console_manager
from ..shared import CLIError, build_cli_logger, exit_with, load_catalog_or_fail, register_command, resolve_config


def build_implementors_table(catalog: ImplementorCatalog, *, library: str, trait_name: str) -> Table:
    """Return a table listing the implementors of ``library`` in catalog order."""

    table = Table(title=Text(f"{library}: {trait_name} implementors"), box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="bold")
    table.add_column("Path", overflow="fold")
    table.add_column("Synthetic", justify="center")
    table.add_column("Signature", overflow="fold")
    for index, descriptor in enumerate(catalog[library], start=1):
        table.add_row(
            str(index),
            Text(descriptor.type_name),
            Text(descriptor.qualified_name),
            "yes" if descriptor.is_synthetic else "no",
            Text(descriptor.plain_text),
        )
    return table


def run_inspect(
    path: Path,
    *,
    config: CatalogConfig,
    console: Console | None = None,
    library: str | None = None,
) -> int:
    """Render the implementors stored at ``path`` and return an exit status.

    Args:
        path: Payload location on disk.
        config: Active configuration.
        console: Optional ``rich`` console for output rendering.
        library: Restrict output to a single library.

    Returns:
        int: ``0`` on success.

    Raises:
        CLIError: If the payload cannot be loaded or ``library`` is unknown.
    """

    console = console or get_console_manager().for_config(config)
    catalog = load_catalog_or_fail(path, config)
    if library is not None and library not in catalog:
        raise CLIError(f"library '{library}' not found in {path}")
    libraries = (library,) if library is not None else catalog.libraries
    total = 0
    for name in libraries:
        console.print(build_implementors_table(catalog, library=name, trait_name=config.trait_name))
        total += len(catalog[name])
    console.print(f"{total} implementors across {len(libraries)} libraries")
    return 0


def inspect_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Payload script or JSON document.")],
    library: Annotated[str | None, typer.Option("--library", "-l", help="Only show this library.")] = None,
) -> None:
    """Show the implementors recorded in a payload."""

    config = resolve_config(ctx)
    logger = build_cli_logger(config)
    try:
        status = run_inspect(path, config=config, console=logger.console, library=library)
    except CLIError as error:
        raise exit_with(logger, error) from error
    raise typer.Exit(code=status)


def register(app: typer.Typer) -> None:
    """Register the inspect command on the Typer application."""

    register_command(app, inspect_command, name="inspect")


__all__ = ["build_implementors_table", "register", "run_inspect"]
