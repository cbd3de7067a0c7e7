# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end report generation: load, aggregate, format and render."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Final

from ..catalog.loader import load_catalog
from ..catalog.model_catalog import Catalog
from .rows import build_operations_table, build_unsupported_table
from .statistics import AggregateStatistics, compute_statistics, summary_drift
from .template import Placeholder, load_template, render_template
from .writer import write_atomic

LOGGER = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class ReportPaths:
    """File locations consumed and produced by one generation run."""

    catalog: Path
    template: Path
    output: Path


@dataclass(frozen=True, slots=True)
class RenderedReport:
    """Rendered document together with the statistics it was built from."""

    document: str
    statistics: AggregateStatistics
    drift: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ReportResult:
    """Outcome of a successful generation run."""

    output: Path
    statistics: AggregateStatistics
    drift: tuple[str, ...] = ()

    @property
    def summary(self) -> str:
        """Return the one-line summary printed after generation."""

        stats = self.statistics
        return f"Generated {self.output} with {stats.total} operations ({stats.with_count} with alternatives)"


def today_utc() -> date:
    """Return the current date in UTC."""

    return datetime.now(timezone.utc).date()


def build_placeholder_values(
    catalog: Catalog,
    stats: AggregateStatistics,
    *,
    generated_at: str,
) -> dict[Placeholder, str]:
    """Return the replacement text for every recognised placeholder.

    Args:
        catalog: Loaded catalog.
        stats: Statistics computed for ``catalog``.
        generated_at: Formatted generation date.

    Returns:
        dict[Placeholder, str]: Replacement text keyed by placeholder.
    """

    return {
        Placeholder.VERSION: catalog.version,
        Placeholder.GENERATED_AT: generated_at,
        Placeholder.TOTAL_OPERATIONS: str(stats.total),
        Placeholder.WITH_ALTERNATIVES: str(stats.with_count),
        Placeholder.WITHOUT_ALTERNATIVES: str(stats.without_count),
        Placeholder.WITH_ALTERNATIVES_PERCENT: str(stats.with_percent),
        Placeholder.WITHOUT_ALTERNATIVES_PERCENT: str(stats.without_percent),
        Placeholder.OPERATIONS_WITH_ALTERNATIVES_TABLE: build_operations_table(catalog.with_alternatives),
        Placeholder.PARTIAL_ALTERNATIVES: str(stats.partial_count),
        Placeholder.OPERATIONS_WITHOUT_ALTERNATIVES_TABLE: build_unsupported_table(catalog.without_alternatives),
        Placeholder.CATALOG_TITLE: catalog.title,
    }


def render_report(
    catalog: Catalog,
    template: str,
    *,
    generated_at: date,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RenderedReport:
    """Render ``template`` for ``catalog`` without touching the filesystem.

    Args:
        catalog: Loaded catalog.
        template: Template text.
        generated_at: Date stamped into the document.
        date_format: ``strftime`` pattern used for ``${GENERATED_AT}``.

    Returns:
        RenderedReport: Document text, statistics and summary drift messages.

    Raises:
        EmptyCatalogError: If the catalog contains no operations.
    """

    stats = compute_statistics(catalog)
    values = build_placeholder_values(catalog, stats, generated_at=generated_at.strftime(date_format))
    return RenderedReport(
        document=render_template(template, values),
        statistics=stats,
        drift=summary_drift(catalog, stats),
    )


def generate_report(
    paths: ReportPaths,
    *,
    generated_at: date | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
    schema_path: Path | None = None,
) -> ReportResult:
    """Generate the report described by ``paths`` and write it atomically.

    Every input is loaded and rendered before the output is touched, so a
    failure at any stage leaves an existing report unchanged.

    Args:
        paths: Catalog, template and output locations.
        generated_at: Date stamped into the document; defaults to today (UTC).
        date_format: ``strftime`` pattern used for ``${GENERATED_AT}``.
        schema_path: Optional override for the bundled catalog schema.

    Returns:
        ReportResult: Output location, statistics and summary drift messages.

    Raises:
        MalformedCatalogError: If the catalog cannot be loaded.
        EmptyCatalogError: If the catalog contains no operations.
        TemplateUnreadableError: If the template cannot be read.
        OutputWriteFailedError: If the output cannot be written.
    """

    catalog = load_catalog(paths.catalog, schema_path=schema_path)
    template = load_template(paths.template)
    rendered = render_report(
        catalog,
        template,
        generated_at=generated_at or today_utc(),
        date_format=date_format,
    )
    write_atomic(paths.output, rendered.document)
    LOGGER.debug("wrote %s (%d bytes)", paths.output, len(rendered.document.encode("utf-8")))
    return ReportResult(output=paths.output, statistics=rendered.statistics, drift=rendered.drift)


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "RenderedReport",
    "ReportPaths",
    "ReportResult",
    "build_placeholder_values",
    "generate_report",
    "render_report",
    "today_utc",
]
