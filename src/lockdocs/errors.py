# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while generating the suggestions report."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar


class ReportError(RuntimeError):
    """Base class for terminal failures of a report generation run."""

    component: ClassVar[str] = "report"

    def __init__(self, message: str, *, path: Path | None = None, exit_code: int = 1) -> None:
        """Create the error with a diagnostic ``message``.

        Args:
            message: Human-readable description of the failure.
            path: Input or output file the failure relates to, when known.
            exit_code: Process exit status the CLI should report.
        """

        super().__init__(message)
        self.message = message
        self.path = path
        self.exit_code = exit_code

    def __str__(self) -> str:
        """Return the diagnostic prefixed with the related file path."""

        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"

    def describe(self) -> str:
        """Return the diagnostic tagged with the failing component.

        Returns:
            str: Message such as ``[catalog] suggestions.yaml: ...``.
        """

        return f"[{self.component}] {self}"


class MalformedCatalogError(ReportError):
    """Raised when the catalog document violates the catalog structure."""

    component = "catalog"

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        field: str | None = None,
    ) -> None:
        """Create the error for the offending catalog ``field``.

        Args:
            message: Description of the violation.
            path: Catalog file being loaded.
            field: Dotted location of the offending value inside the catalog.
        """

        super().__init__(message, path=path)
        self.field = field

    def __str__(self) -> str:
        """Return the diagnostic including the offending field location."""

        location = f"{self.field}: " if self.field else ""
        prefix = f"{self.path}: " if self.path is not None else ""
        return f"{prefix}{location}{self.message}"


class EmptyCatalogError(ReportError):
    """Raised when the catalog holds no operations at all."""

    component = "statistics"


class TemplateUnreadableError(ReportError):
    """Raised when the report template cannot be read."""

    component = "template"


class OutputWriteFailedError(ReportError):
    """Raised when the rendered report cannot be written to its destination."""

    component = "output"


__all__ = [
    "EmptyCatalogError",
    "MalformedCatalogError",
    "OutputWriteFailedError",
    "ReportError",
    "TemplateUnreadableError",
]
