# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run a payload through the registration bridge."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ...bridge import (
    DiscoveredConsumer,
    RegistrationContext,
    RegistrationOutcome,
    discover_consumers,
    register_implementors,
    select_consumer,
)
from ...config import CatalogConfig
from ..shared import (
    CLIError,
    CLILogger,
    build_cli_logger,
    exit_with,
    load_catalog_or_fail,
    register_command,
    resolve_config,
)


def run_register(
    path: Path,
    *,
    config: CatalogConfig,
    logger: CLILogger,
    consumers: Sequence[DiscoveredConsumer] | None = None,
    consumer_name: str | None = None,
) -> RegistrationOutcome:
    """Register the catalog at ``path`` with the configured consumer.

    Args:
        path: Payload location on disk.
        config: Active configuration naming the consumer entry point group.
        logger: Logger used to report the outcome.
        consumers: Optional consumer overrides; discovered from entry points when omitted.
        consumer_name: Entry point name to bind instead of ``config.consumer``.

    Returns:
        RegistrationOutcome: Whether the catalog reached a consumer.

    Raises:
        CLIError: If the payload is invalid or the requested consumer is unknown.
    """

    catalog = load_catalog_or_fail(path, config)
    available = discover_consumers(config.consumer_group) if consumers is None else tuple(consumers)
    requested = consumer_name or config.consumer
    try:
        selected = select_consumer(available, name=requested)
    except LookupError as exc:
        raise CLIError(f"consumer '{requested}' is not registered under '{config.consumer_group}'") from exc

    context = RegistrationContext(hook=selected.hook if selected is not None else None)
    outcome = register_implementors(catalog, context=context)
    logger.registration(
        outcome,
        catalog,
        consumer=selected.name if selected is not None else None,
        consumer_group=config.consumer_group,
    )
    return outcome


def register_payload_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Payload script or JSON document.")],
    consumer: Annotated[str | None, typer.Option("--consumer", "-c", help="Consumer entry point name.")] = None,
    require_consumer: Annotated[
        bool,
        typer.Option("--require-consumer", help="Exit with status 2 when the catalog stays pending."),
    ] = False,
) -> None:
    """Hand a payload's catalog to the installed consumer hook."""

    config = resolve_config(ctx)
    logger = build_cli_logger(config)
    try:
        outcome = run_register(path, config=config, logger=logger, consumer_name=consumer)
    except CLIError as error:
        raise exit_with(logger, error) from error
    if require_consumer and outcome is RegistrationOutcome.PENDING:
        raise typer.Exit(code=2)


def register(app: typer.Typer) -> None:
    """Register the register command on the Typer application."""

    register_command(app, register_payload_command, name="register")


__all__ = ["register", "run_register"]
