# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Codec for the self-registering implementors payload script.

The documentation generator ships each trait's implementors as a small script
that builds the catalog and hands it to the viewer::

    (function() {var implementors = {};
    implementors["mylib"] = [{"text":"...","synthetic":false,"types":["mylib::Foo"]}];
    if (window.register_implementors) {window.register_implementors(implementors);} else {window.pending_implementors = implementors;}})()

One assignment line is emitted per library and the file has no trailing newline.
"""

from __future__ import annotations

import json
import re
from typing import Final, cast

from .builder import build_catalog
from .errors import CatalogIntegrityError
from .model_catalog import ImplementorCatalog
from .types import JSONValue

SCRIPT_PROLOGUE: Final[str] = "(function() {var implementors = {};"
SCRIPT_EPILOGUE: Final[str] = (
    "if (window.register_implementors) {window.register_implementors(implementors);} "
    "else {window.pending_implementors = implementors;}})()"
)

# Only "\n" separates statements; other line breaks may appear inside JSON strings.
_LINE_PADDING: Final[str] = " \t\r"

_ASSIGNMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'^implementors\[(?P<key>"(?:[^"\\]|\\.)*")\] = (?P<value>\[.*\]);$',
)


def render_payload_script(catalog: ImplementorCatalog) -> str:
    """Render ``catalog`` in the generator's payload script layout.

    Args:
        catalog: Catalog to render.

    Returns:
        str: Script text without a trailing newline.
    """

    lines = [SCRIPT_PROLOGUE]
    for library, items in catalog.to_dict().items():
        key = json.dumps(library, ensure_ascii=False)
        value = json.dumps(items, separators=(",", ":"), ensure_ascii=False)
        lines.append(f"implementors[{key}] = {value};")
    lines.append(SCRIPT_EPILOGUE)
    return "\n".join(lines)


def parse_payload_script(text: str, *, context: str = "<script>") -> dict[str, JSONValue]:
    """Extract the catalog literal embedded in a payload script.

    Args:
        text: Script contents as produced by the generator.
        context: Human-readable prefix used in error messages.

    Returns:
        dict[str, JSONValue]: Literal mapping library names to descriptor mappings.

    Raises:
        CatalogIntegrityError: If the script does not follow the generator layout.
    """

    lines = [line.strip(_LINE_PADDING) for line in text.strip(_LINE_PADDING + "\n").split("\n")]
    if len(lines) < 2 or lines[0] != SCRIPT_PROLOGUE or lines[-1] != SCRIPT_EPILOGUE:
        raise CatalogIntegrityError(f"{context}: not an implementors payload script")
    literal: dict[str, JSONValue] = {}
    for offset, line in enumerate(lines[1:-1], start=2):
        if not line:
            continue
        match = _ASSIGNMENT_PATTERN.match(line)
        if match is None:
            raise CatalogIntegrityError(f"{context}:{offset}: unexpected statement")
        try:
            key = cast(str, json.loads(match.group("key")))
            value = cast(JSONValue, json.loads(match.group("value")))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{context}:{offset}: malformed implementors literal") from exc
        literal[key] = value
    return literal


def load_payload_script(text: str, *, context: str = "<script>") -> ImplementorCatalog:
    """Parse ``text`` and build the catalog it embeds.

    Args:
        text: Script contents as produced by the generator.
        context: Human-readable prefix used in error messages.

    Returns:
        ImplementorCatalog: Catalog equal to the embedded literal.
    """

    return build_catalog(parse_payload_script(text, context=context), context=context)


__all__ = [
    "SCRIPT_EPILOGUE",
    "SCRIPT_PROLOGUE",
    "load_payload_script",
    "parse_payload_script",
    "render_payload_script",
]
