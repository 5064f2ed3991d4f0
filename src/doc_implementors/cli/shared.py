# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console

from ..bridge import RegistrationOutcome
from ..catalog import (
    CatalogIntegrityError,
    CatalogLoader,
    CatalogValidationError,
    ImplementorCatalog,
    PayloadFormat,
)
from ..config import CatalogConfig, ConfigError, load_config
from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import report_registration

CommandT = TypeVar("CommandT", bound=Callable[..., Any])


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def registration(
        self,
        outcome: RegistrationOutcome,
        catalog: ImplementorCatalog,
        *,
        consumer: str | None,
        consumer_group: str,
    ) -> None:
        """Report where a registered catalog ended up."""

        report_registration(
            outcome,
            catalog,
            consumer=consumer,
            consumer_group=consumer_group,
            use_emoji=self.use_emoji,
            use_color=self.use_color,
        )

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(config: CatalogConfig, *, console: Console | None = None) -> CLILogger:
    """Return a ``CLILogger`` configured from ``config``.

    Args:
        config: Active configuration supplying emoji and colour preferences.
        console: Optional console used for rich renderables.

    Returns:
        CLILogger: Logger instance bound to a Rich console.
    """

    resolved_console = console or get_console_manager().for_config(config)
    return CLILogger(console=resolved_console, use_emoji=config.emoji, use_color=config.color)


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr at DEBUG or WARNING level."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_config(ctx: typer.Context) -> CatalogConfig:
    """Return the configuration stored on ``ctx`` by the application callback.

    Args:
        ctx: Typer context for the running command.

    Returns:
        CatalogConfig: Configuration for the invocation.

    Raises:
        CLIError: If the project configuration is invalid.
    """

    config = ctx.obj if isinstance(ctx.obj, CatalogConfig) else None
    if config is not None:
        return config
    try:
        return load_config(Path.cwd())
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def load_catalog_or_fail(
    path: Path,
    config: CatalogConfig,
    *,
    payload_format: PayloadFormat | None = None,
) -> ImplementorCatalog:
    """Load the catalog at ``path`` translating catalog failures into ``CLIError``.

    Args:
        path: Payload location on disk.
        config: Active configuration controlling schema validation.
        payload_format: Explicit wire form; inferred from the suffix when omitted.

    Returns:
        ImplementorCatalog: Catalog stored at ``path``.

    Raises:
        CLIError: If the payload is missing, malformed or fails validation.
    """

    loader = catalog_loader(config)
    try:
        return loader.load_catalog(path, payload_format=payload_format)
    except FileNotFoundError as exc:
        raise CLIError(f"payload not found: {path}") from exc
    except (CatalogIntegrityError, CatalogValidationError) as exc:
        raise CLIError(str(exc)) from exc


def catalog_loader(config: CatalogConfig) -> CatalogLoader:
    """Return a loader honouring the schema settings in ``config``."""

    return CatalogLoader(schema_root=config.schema_root, validate_schema=config.validate_schema)


def exit_with(logger: CLILogger, error: CLIError) -> typer.Exit:
    """Report ``error`` and return the ``typer.Exit`` that ends the command.

    Args:
        logger: Logger used to print the failure.
        error: Failure raised by the command service.

    Returns:
        typer.Exit: Exit exception carrying the error's status code.
    """

    logger.fail(str(error))
    return typer.Exit(code=error.exit_code)


def register_command(
    app: typer.Typer,
    callback: CommandT,
    *,
    name: str,
    help_text: str | None = None,
) -> CommandT:
    """Register ``callback`` on ``app`` with consistent metadata handling.

    Args:
        app: Typer application receiving the command registration.
        callback: Command callable to register.
        name: Command name shown in CLI usage output.
        help_text: Help text shown in CLI usage output; Typer falls back to the docstring.

    Returns:
        CommandT: The registered callback.
    """

    app.command(name=name, help=help_text)(callback)
    return callback


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "catalog_loader",
    "configure_logging",
    "exit_with",
    "load_catalog_or_fail",
    "register_command",
    "resolve_config",
]
