# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Check CLI command package."""

from __future__ import annotations

import typer

from .command import check_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the check command on the provided Typer application.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="check", help="Validate the catalog and print its statistics.")(check_command)
