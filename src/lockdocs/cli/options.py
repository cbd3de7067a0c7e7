# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations shared by lockdocs commands."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Annotated, Any

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml and relative paths."),
]
CATALOG_OPTION = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Catalog YAML file (overrides configuration)."),
]
TEMPLATE_OPTION = Annotated[
    Path | None,
    typer.Option("--template", "-t", help="Report template file (overrides configuration)."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Destination of the rendered report (overrides configuration)."),
]
DATE_OPTION = Annotated[
    datetime | None,
    typer.Option("--date", formats=["%Y-%m-%d"], help="Generation date to stamp (default: today, UTC)."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle coloured output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Show debug diagnostics."),
]


def absolute_overrides(**paths: Path | None) -> Mapping[str, Any]:
    """Return ``paths`` resolved against the working directory, dropping ``None``.

    Command-line paths are relative to where the command runs, unlike
    configuration paths which are anchored at the project root.
    """

    return {key: path.resolve() for key, path in paths.items() if path is not None}


__all__ = [
    "CATALOG_OPTION",
    "COLOR_OPTION",
    "DATE_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "OUTPUT_OPTION",
    "ROOT_OPTION",
    "TEMPLATE_OPTION",
    "absolute_overrides",
]
