# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands

app = typer.Typer(
    name="lockdocs",
    help="Render the safe-migration suggestions report from its catalog.",
    no_args_is_help=True,
    add_completion=False,
)
register_commands(app)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lockdocs {__version__}")
        raise typer.Exit()


@app.callback()
def _main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Render the safe-migration suggestions report from its catalog."""


def main() -> None:
    """Run the lockdocs command-line interface."""

    app()


__all__ = ["app", "main"]
