# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the generate and check commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from helpers.catalogs import make_catalog
from typer.testing import CliRunner

from lockdocs import __version__
from lockdocs.cli.app import app

PLAIN = ["--no-emoji", "--no-color"]


def _generate_args(catalog: Path, template: Path, output: Path, *extra: str) -> list[str]:
    return [
        "generate",
        "--catalog",
        str(catalog),
        "--template",
        str(template),
        "--output",
        str(output),
        *PLAIN,
        *extra,
    ]


def test_generate_writes_report(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> None:
    runner = CliRunner()
    output = tmp_path / "out" / "suggestions.md"

    result = runner.invoke(
        app,
        _generate_args(write_catalog(catalog_data), template_path, output, "--date", "2025-01-15"),
    )

    assert result.exit_code == 0, result.output
    assert "with 5 operations (3 with alternatives)" in result.output
    document = output.read_text(encoding="utf-8")
    assert "Generated: 2025-01-15" in document
    assert "| ADD FOREIGN KEY | Constraint Operations |" in document


def test_generate_uses_pyproject_configuration(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> None:
    runner = CliRunner()
    write_catalog(catalog_data)
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.lockdocs]
catalog = "suggestions.yaml"
template = "suggestions.template.md"
output = "report/suggestions.md"
date-format = "%Y/%m/%d"
""".strip(),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["generate", "--root", str(tmp_path), "--date", "2025-01-15", *PLAIN])

    assert result.exit_code == 0, result.output
    document = (tmp_path / "report" / "suggestions.md").read_text(encoding="utf-8")
    assert "Generated: 2025/01/15" in document


def test_generate_reports_malformed_catalog(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> None:
    runner = CliRunner()
    del catalog_data["operations_with_alternatives"][1]["steps"][0]["can_run_in_transaction"]
    output = tmp_path / "suggestions.md"

    result = runner.invoke(app, _generate_args(write_catalog(catalog_data), template_path, output))

    assert result.exit_code == 1
    assert "[catalog]" in result.output
    assert "operations_with_alternatives[1].steps[0].can_run_in_transaction" in result.output
    assert not output.exists()


def test_generate_reports_empty_catalog(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    template_path: Path,
) -> None:
    runner = CliRunner()
    output = tmp_path / "suggestions.md"

    result = runner.invoke(app, _generate_args(write_catalog(make_catalog([], [])), template_path, output))

    assert result.exit_code == 1
    assert "[statistics]" in result.output
    assert not output.exists()


def test_generate_reports_missing_template(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        _generate_args(write_catalog(catalog_data), tmp_path / "missing.md", tmp_path / "suggestions.md"),
    )

    assert result.exit_code == 1
    assert "[template]" in result.output
    assert "template file not found" in result.output


def test_generate_warns_about_summary_drift(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> None:
    runner = CliRunner()
    catalog_data["summary"] = {"with_safe_alternatives": 4, "without_safe_alternatives": 2}

    result = runner.invoke(
        app,
        _generate_args(write_catalog(catalog_data), template_path, tmp_path / "suggestions.md"),
    )

    assert result.exit_code == 0, result.output
    assert "summary.with_safe_alternatives declares 4 but the catalog lists 3" in result.output


def test_check_prints_statistics(
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
) -> None:
    runner = CliRunner()
    path = write_catalog(catalog_data)

    result = runner.invoke(app, ["check", "--catalog", str(path), *PLAIN])

    assert result.exit_code == 0, result.output
    assert "CRITICAL Operations - Suggestion Mapping" in result.output
    assert "Total operations" in result.output
    assert "3 (60%)" in result.output
    assert "2 (40%)" in result.output
    assert "Transaction safety" in result.output
    assert "No summary block declared" in result.output
    assert "is valid: 5 operations (3 with alternatives)" in result.output


def test_check_reports_malformed_catalog(
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
) -> None:
    runner = CliRunner()
    del catalog_data["version"]

    result = runner.invoke(app, ["check", "--catalog", str(write_catalog(catalog_data)), *PLAIN])

    assert result.exit_code == 1
    assert "[catalog]" in result.output
    assert "version" in result.output


def test_version_option() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"lockdocs {__version__}"


def test_generate_reports_unencodable_report_text(tmp_path: Path, template_path: Path) -> None:
    runner = CliRunner()
    catalog = tmp_path / "suggestions.yaml"
    catalog.write_text(
        'version: "1.0"\n'
        "operations_with_alternatives:\n"
        "  - operation: ADD COLUMN\n"
        "    category: DDL Operations\n"
        "    steps:\n"
        '      - description: "broken \\udc80 text"\n'
        "        can_run_in_transaction: true\n"
        "operations_without_alternatives: []\n",
        encoding="utf-8",
    )
    output = tmp_path / "docs" / "suggestions.md"

    result = runner.invoke(app, _generate_args(catalog, template_path, output))

    assert result.exit_code == 1
    assert "[output]" in result.output
    assert not output.parent.exists() or list(output.parent.iterdir()) == []


def test_generate_debug_prints_resolved_locations(
    tmp_path: Path,
    write_catalog: Callable[..., Path],
    catalog_data: dict[str, Any],
    template_path: Path,
) -> None:
    runner = CliRunner()
    catalog = write_catalog(catalog_data)
    output = tmp_path / "suggestions.md"

    result = runner.invoke(app, _generate_args(catalog, template_path, output, "--debug"))

    assert result.exit_code == 0, result.output
    assert f"[debug] catalog={catalog} template={template_path} output={output}" in result.output
