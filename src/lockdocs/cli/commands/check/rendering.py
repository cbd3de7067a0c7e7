# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the check command."""

from __future__ import annotations

from collections import Counter

from rich import box
from rich.table import Table
from rich.text import Text

from ....catalog.model_catalog import Catalog
from ....report.rows import transaction_label
from ....report.statistics import AggregateStatistics
from ....report.transactions import TransactionStatus, reduce_steps


def build_statistics_table(catalog: Catalog, stats: AggregateStatistics) -> Table:
    """Return a rich table summarising catalog counts.

    Args:
        catalog: Loaded catalog.
        stats: Statistics computed for ``catalog``.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title=Text(catalog.title or "Catalog"), box=box.SIMPLE, expand=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")

    table.add_row("Version", Text(catalog.version))
    table.add_row("Total operations", str(stats.total))
    table.add_row("With alternatives", f"{stats.with_count} ({stats.with_percent}%)")
    table.add_row("Without alternatives", f"{stats.without_count} ({stats.without_percent}%)")
    table.add_row("Partial alternatives", str(stats.partial_count))
    return table


def build_transaction_table(catalog: Catalog) -> Table:
    """Return a rich table counting operations per transaction status."""

    counts = Counter(reduce_steps(operation.steps) for operation in catalog.with_alternatives)
    table = Table(title="Transaction safety", box=box.SIMPLE, expand=False)
    table.add_column("Status", style="bold")
    table.add_column("Operations", justify="right")
    for status in TransactionStatus:
        table.add_row(transaction_label(status), str(counts.get(status, 0)))
    return table


__all__ = ["build_statistics_table", "build_transaction_table"]
