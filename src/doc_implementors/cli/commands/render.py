# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Convert payloads between the JSON document and payload script forms."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog import ImplementorCatalog, PayloadFormat, dump_document, render_payload_script
from ...config import CatalogConfig
from ..shared import CLIError, build_cli_logger, exit_with, load_catalog_or_fail, register_command, resolve_config


def render_catalog(catalog: ImplementorCatalog, payload_format: PayloadFormat) -> str:
    """Return ``catalog`` encoded in ``payload_format``."""

    if payload_format is PayloadFormat.SCRIPT:
        return render_payload_script(catalog)
    return dump_document(catalog)


def run_render(
    path: Path,
    *,
    config: CatalogConfig,
    payload_format: PayloadFormat,
    output: Path | None = None,
) -> str:
    """Load ``path`` and re-encode it in ``payload_format``.

    Args:
        path: Payload location on disk.
        config: Active configuration.
        payload_format: Target wire form.
        output: Optional destination file; the rendered text is returned either way.

    Returns:
        str: Rendered payload text.
    """

    catalog = load_catalog_or_fail(path, config)
    text = render_catalog(catalog, payload_format)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        suffix = "" if payload_format is PayloadFormat.SCRIPT else "\n"
        output.write_text(text + suffix, encoding="utf-8")
    return text


def render_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Payload script or JSON document.")],
    payload_format: Annotated[
        PayloadFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Output wire form."),
    ] = PayloadFormat.SCRIPT,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to this file.")] = None,
    default_location: Annotated[
        bool,
        typer.Option(
            "--default-location",
            help="Write to the configured payload path (.json suffix for JSON output).",
        ),
    ] = False,
) -> None:
    """Re-encode a payload as a payload script or JSON document."""

    config = resolve_config(ctx)
    logger = build_cli_logger(config)
    if default_location and output is None:
        output = config.payload_path()
        if payload_format is PayloadFormat.JSON:
            output = output.with_suffix(".json")
    try:
        text = run_render(path, config=config, payload_format=payload_format, output=output)
    except CLIError as error:
        raise exit_with(logger, error) from error
    if output is None:
        logger.echo(text)
    else:
        logger.ok(f"wrote {payload_format.value} payload to {output}")


def register(app: typer.Typer) -> None:
    """Register the render command on the Typer application."""

    register_command(app, render_command, name="render")


__all__ = ["register", "render_catalog", "run_render"]
