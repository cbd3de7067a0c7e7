# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for report generation."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from helpers.catalogs import make_catalog, make_operation, make_unsupported

from lockdocs.catalog import load_catalog
from lockdocs.errors import EmptyCatalogError, MalformedCatalogError, TemplateUnreadableError
from lockdocs.report import ReportPaths, generate_report, render_report

GENERATED_ON = date(2025, 1, 15)

EXPECTED_DOCUMENT = """# Suggestions (v1.0)

Generated: 2025-01-15

Total: 5
With: 3 (60%)
Without: 2 (40%)

| Operation | Category | Steps | In transaction |
|-----------|----------|-------|----------------|
| CREATE INDEX | Index Operations | Use `CREATE INDEX CONCURRENTLY` | ❌ No |
| ADD FOREIGN KEY | Constraint Operations | Add constraint `NOT VALID`; `VALIDATE CONSTRAINT` | ✅ Yes |
| UPDATE without WHERE | DML Operations | Export target row IDs to file; Process file in batches with progress tracking | ⚠️ Mixed |
"""


@pytest.fixture
def paths(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> ReportPaths:
    return ReportPaths(
        catalog=write_catalog(catalog_data),
        template=template_path,
        output=tmp_path / "docs" / "suggestions.md",
    )


def test_generate_report_writes_rendered_document(paths: ReportPaths) -> None:
    result = generate_report(paths, generated_at=GENERATED_ON)

    assert paths.output.read_text(encoding="utf-8") == EXPECTED_DOCUMENT
    assert result.output == paths.output
    assert result.statistics.total == 5
    assert result.drift == ()
    assert result.summary == f"Generated {paths.output} with 5 operations (3 with alternatives)"


def test_generate_report_overwrites_previous_output(paths: ReportPaths) -> None:
    paths.output.parent.mkdir(parents=True)
    paths.output.write_text("stale report\n", encoding="utf-8")

    generate_report(paths, generated_at=GENERATED_ON)

    assert paths.output.read_text(encoding="utf-8") == EXPECTED_DOCUMENT


def test_custom_date_format(paths: ReportPaths) -> None:
    generate_report(paths, generated_at=GENERATED_ON, date_format="%d %B %Y")

    assert "Generated: 15 January 2025" in paths.output.read_text(encoding="utf-8")


def test_render_report_fills_supplementary_placeholders(write_catalog: Callable[..., Path]) -> None:
    payload = make_catalog(
        [
            make_operation("CLUSTER", [False], partial_alternative=True),
            make_operation("ADD COLUMN", [True]),
        ],
        [make_unsupported("DROP TABLE", category="DDL Operations", reason="Destructive operation")],
        metadata={"title": "Critical operations"},
    )
    catalog = load_catalog(write_catalog(payload))
    template = "${CATALOG_TITLE}\npartial=${PARTIAL_ALTERNATIVES}\n${OPERATIONS_WITHOUT_ALTERNATIVES_TABLE}\n"

    rendered = render_report(catalog, template, generated_at=GENERATED_ON)

    assert rendered.document == (
        "Critical operations\npartial=1\n| DROP TABLE | DDL Operations | Destructive operation |\n"
    )
    assert rendered.statistics.partial_count == 1


def test_render_report_reports_summary_drift(write_catalog: Callable[..., Path]) -> None:
    payload = make_catalog(
        [make_operation("ADD COLUMN", [True])],
        [],
        summary={"with_safe_alternatives": 2},
    )
    catalog = load_catalog(write_catalog(payload))

    rendered = render_report(catalog, "${TOTAL_OPERATIONS}", generated_at=GENERATED_ON)

    assert rendered.document == "1"
    assert rendered.drift == ("summary.with_safe_alternatives declares 2 but the catalog lists 1",)


def test_empty_catalog_leaves_output_absent(paths: ReportPaths, write_catalog: Callable[..., Path]) -> None:
    empty = ReportPaths(
        catalog=write_catalog(make_catalog([], []), name="empty.yaml"),
        template=paths.template,
        output=paths.output,
    )

    with pytest.raises(EmptyCatalogError):
        generate_report(empty, generated_at=GENERATED_ON)

    assert not paths.output.exists()


def test_empty_catalog_leaves_existing_output_untouched(
    paths: ReportPaths,
    write_catalog: Callable[..., Path],
) -> None:
    paths.output.parent.mkdir(parents=True)
    paths.output.write_text("previous report\n", encoding="utf-8")
    empty = ReportPaths(
        catalog=write_catalog(make_catalog([], []), name="empty.yaml"),
        template=paths.template,
        output=paths.output,
    )

    with pytest.raises(EmptyCatalogError):
        generate_report(empty, generated_at=GENERATED_ON)

    assert paths.output.read_text(encoding="utf-8") == "previous report\n"


def test_missing_template_leaves_existing_output_untouched(paths: ReportPaths, tmp_path: Path) -> None:
    paths.output.parent.mkdir(parents=True)
    paths.output.write_text("previous report\n", encoding="utf-8")
    broken = ReportPaths(catalog=paths.catalog, template=tmp_path / "missing.md", output=paths.output)

    with pytest.raises(TemplateUnreadableError):
        generate_report(broken, generated_at=GENERATED_ON)

    assert paths.output.read_text(encoding="utf-8") == "previous report\n"


def test_malformed_catalog_stops_before_template(
    paths: ReportPaths,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    tmp_path: Path,
) -> None:
    del catalog_data["operations_with_alternatives"][0]["steps"][0]["can_run_in_transaction"]
    broken = ReportPaths(
        catalog=write_catalog(catalog_data, name="broken.yaml"),
        template=tmp_path / "missing.md",
        output=paths.output,
    )

    with pytest.raises(MalformedCatalogError):
        generate_report(broken, generated_at=GENERATED_ON)

    assert not paths.output.exists()
