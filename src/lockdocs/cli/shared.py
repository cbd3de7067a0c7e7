# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, debug output)."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, TextIO

import typer
from rich.console import Console
from rich.text import Text

from ..errors import ReportError
from ..logging import console_for, detect_tty
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn

PACKAGE_LOGGER_NAME: Final[str] = "lockdocs"


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, **fields: Path | str | None) -> None:
        """Print the resolved inputs of a command when ``--debug`` is set.

        Args:
            **fields: Named locations such as ``catalog`` or ``output``; unset
                values print as ``-``.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug]", style="bold cyan")
        for name, value in fields.items():
            text.append(" ")
            text.append(name, style="bold magenta")
            text.append("=", style="dim")
            text.append("-" if value is None else str(value), style="green")
        self.console.print(text)

    def report_failure(self, exc: ReportError) -> typer.Exit:
        """Log ``exc`` and return the ``typer.Exit`` that terminates the command.

        Args:
            exc: Pipeline error raised by the command.

        Returns:
            typer.Exit: Exit carrying the error's status code.
        """

        self.fail(exc.describe())
        return typer.Exit(code=exc.exit_code)


def build_cli_logger(*, emoji: bool, color: bool = True, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags."""

    use_color = color and detect_tty()
    if debug:
        _ensure_debug_logger()
    return CLILogger(
        console=console_for(color=use_color, emoji=emoji),
        use_emoji=emoji,
        use_color=use_color,
        debug_enabled=debug,
    )


class _StderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever ``sys.stderr`` is when a record is emitted."""

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        del value


def _ensure_debug_logger() -> None:
    """Stream library debug records to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if getattr(logger, "_lockdocs_debug_configured", False):
        return
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    setattr(logger, "_lockdocs_debug_configured", True)


__all__ = ["CLILogger", "build_cli_logger"]
