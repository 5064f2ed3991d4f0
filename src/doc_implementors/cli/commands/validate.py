# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validate payloads against the catalog schema and invariants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import CatalogConfig
from ...logging import catalog_summary
from ..shared import (
    CLIError,
    CLILogger,
    build_cli_logger,
    exit_with,
    load_catalog_or_fail,
    register_command,
    resolve_config,
)


def run_validate(paths: list[Path], *, config: CatalogConfig, logger: CLILogger) -> int:
    """Validate each payload in ``paths`` and return an exit status.

    Every path is checked even after a failure so the report is complete.

    Args:
        paths: Payload locations on disk.
        config: Active configuration.
        logger: Logger used for per-file results.

    Returns:
        int: ``0`` when every payload is valid, ``1`` otherwise.
    """

    failures = 0
    for path in paths:
        try:
            catalog = load_catalog_or_fail(path, config)
        except CLIError as error:
            logger.fail(str(error))
            failures += 1
            continue
        logger.ok(f"{path}: {catalog_summary(catalog)}")
    return 1 if failures else 0


def validate_command(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Payload scripts or JSON documents.")],
) -> None:
    """Check payloads for schema and integrity problems."""

    config = resolve_config(ctx)
    logger = build_cli_logger(config)
    if not config.validate_schema:
        config = config.model_copy(update={"validate_schema": True})
    try:
        status = run_validate(paths, config=config, logger=logger)
    except CLIError as error:  # pragma: no cover - run_validate reports per file
        raise exit_with(logger, error) from error
    raise typer.Exit(code=status)


def register(app: typer.Typer) -> None:
    """Register the validate command on the Typer application."""

    register_command(app, validate_command, name="validate")


__all__ = ["register", "run_validate"]
