# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Aggregate counts and percentage splits over the catalog."""

from __future__ import annotations

from dataclasses import dataclass

from ..catalog.model_catalog import Catalog
from ..errors import EmptyCatalogError


@dataclass(frozen=True, slots=True)
class AggregateStatistics:
    """Summary counts derived from a catalog."""

    total: int
    with_count: int
    without_count: int
    with_percent: int
    without_percent: int
    partial_count: int = 0


def percent_of(part: int, total: int) -> int:
    """Return ``part`` as a whole percentage of ``total``, rounded down.

    Raises:
        ZeroDivisionError: If ``total`` is zero.
    """

    return part * 100 // total


def compute_statistics(catalog: Catalog) -> AggregateStatistics:
    """Compute totals and percentage splits for ``catalog``.

    Percentages use floor division, so 7 of 15 is reported as 46.

    Args:
        catalog: Loaded catalog.

    Returns:
        AggregateStatistics: Counts and percentages for both collections.

    Raises:
        EmptyCatalogError: If the catalog contains no operations.
    """

    with_count = len(catalog.with_alternatives)
    without_count = len(catalog.without_alternatives)
    total = with_count + without_count
    if total == 0:
        raise EmptyCatalogError(
            "catalog contains no operations; percentages are undefined",
            path=catalog.source,
        )
    return AggregateStatistics(
        total=total,
        with_count=with_count,
        without_count=without_count,
        with_percent=percent_of(with_count, total),
        without_percent=percent_of(without_count, total),
        partial_count=sum(1 for operation in catalog.with_alternatives if operation.partial_alternative),
    )


def summary_drift(catalog: Catalog, stats: AggregateStatistics) -> tuple[str, ...]:
    """Compare the catalog's hand-maintained summary against computed counts.

    Args:
        catalog: Loaded catalog, possibly carrying a ``summary`` block.
        stats: Statistics computed from the catalog entries.

    Returns:
        tuple[str, ...]: One message per declared count that disagrees with
        the computed value. Empty when no summary is declared or all agree.
    """

    declared = catalog.declared_summary
    if declared is None:
        return ()
    checks = (
        ("with_safe_alternatives", declared.with_alternatives, stats.with_count),
        ("without_safe_alternatives", declared.without_alternatives, stats.without_count),
        ("partial_alternatives", declared.partial_alternatives, stats.partial_count),
    )
    return tuple(
        f"summary.{key} declares {expected} but the catalog lists {actual}"
        for key, expected, actual in checks
        if expected is not None and expected != actual
    )


__all__ = ["AggregateStatistics", "compute_statistics", "percent_of", "summary_drift"]
