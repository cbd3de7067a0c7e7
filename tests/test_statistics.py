# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog aggregate statistics."""

from __future__ import annotations

import pytest

from lockdocs.catalog import Catalog, DeclaredSummary, Operation, Step, UnsupportedOperation
from lockdocs.errors import EmptyCatalogError
from lockdocs.report.statistics import AggregateStatistics, compute_statistics, percent_of, summary_drift


def _catalog(with_count: int, without_count: int, *, partial: int = 0, summary: DeclaredSummary | None = None) -> Catalog:
    operations = tuple(
        Operation(
            name=f"op-{index}",
            category="DDL Operations",
            steps=(Step("step", True),),
            partial_alternative=index < partial,
        )
        for index in range(with_count)
    )
    unsupported = tuple(UnsupportedOperation(name=f"unsupported-{index}") for index in range(without_count))
    return Catalog(
        version="1.0",
        with_alternatives=operations,
        without_alternatives=unsupported,
        declared_summary=summary,
    )


def test_three_with_and_twelve_without() -> None:
    stats = compute_statistics(_catalog(3, 12))

    assert stats == AggregateStatistics(
        total=15,
        with_count=3,
        without_count=12,
        with_percent=20,
        without_percent=80,
    )


def test_percentages_round_down() -> None:
    stats = compute_statistics(_catalog(7, 8))

    assert stats.with_percent == 46
    assert stats.without_percent == 53


def test_production_catalog_split() -> None:
    stats = compute_statistics(_catalog(18, 12))

    assert (stats.total, stats.with_percent, stats.without_percent) == (30, 60, 40)


@pytest.mark.parametrize(("with_count", "without_count"), [(1, 0), (0, 1), (1, 2), (2, 1), (1, 6), (5, 7), (31, 0)])
def test_percentages_never_exceed_one_hundred(with_count: int, without_count: int) -> None:
    stats = compute_statistics(_catalog(with_count, without_count))

    assert 0 <= stats.with_percent <= 100
    assert 0 <= stats.without_percent <= 100
    assert stats.with_percent + stats.without_percent <= 100


def test_empty_catalog_is_rejected() -> None:
    with pytest.raises(EmptyCatalogError) as excinfo:
        compute_statistics(_catalog(0, 0))

    assert excinfo.value.component == "statistics"


def test_partial_alternatives_are_counted() -> None:
    assert compute_statistics(_catalog(4, 1, partial=1)).partial_count == 1


def test_percent_of_floors() -> None:
    assert percent_of(2, 3) == 66
    assert percent_of(1, 3) == 33


def test_summary_drift_lists_only_disagreements() -> None:
    catalog = _catalog(
        3,
        2,
        partial=1,
        summary=DeclaredSummary(with_alternatives=3, without_alternatives=4, partial_alternatives=None),
    )

    drift = summary_drift(catalog, compute_statistics(catalog))

    assert drift == ("summary.without_safe_alternatives declares 4 but the catalog lists 2",)


def test_summary_drift_without_declared_summary() -> None:
    catalog = _catalog(1, 1)

    assert summary_drift(catalog, compute_statistics(catalog)) == ()
