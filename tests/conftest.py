# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml
from helpers.catalogs import make_catalog, make_step, make_unsupported

TEMPLATE_TEXT = """# Suggestions (v${VERSION})

Generated: ${GENERATED_AT}

Total: ${TOTAL_OPERATIONS}
With: ${WITH_ALTERNATIVES} (${WITH_ALTERNATIVES_PERCENT}%)
Without: ${WITHOUT_ALTERNATIVES} (${WITHOUT_ALTERNATIVES_PERCENT}%)

| Operation | Category | Steps | In transaction |
|-----------|----------|-------|----------------|
${OPERATIONS_WITH_ALTERNATIVES_TABLE}
"""


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """Return a small but realistic catalog payload."""

    return make_catalog(
        [
            {
                "operation": "CREATE INDEX",
                "category": "Index Operations",
                "steps": [
                    make_step("Use `CREATE INDEX CONCURRENTLY`", False, type="sql", sql_template="CREATE INDEX ..."),
                ],
            },
            {
                "operation": "ADD FOREIGN KEY",
                "category": "Constraint Operations",
                "steps": [
                    make_step("Add constraint `NOT VALID`", True, type="sql"),
                    make_step("`VALIDATE CONSTRAINT`", True, type="sql"),
                ],
            },
            {
                "operation": "UPDATE without WHERE",
                "category": "DML Operations",
                "steps": [
                    make_step("Export target row IDs to file", True, type="sql"),
                    make_step("Process file in batches with progress tracking", False, type="procedural"),
                ],
            },
        ],
        [
            make_unsupported("TRUNCATE", category="DML Operations", reason="Requires AccessExclusive lock"),
            make_unsupported("DROP TABLE"),
        ],
        metadata={"title": "CRITICAL Operations - Suggestion Mapping"},
    )


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that serialises a payload to a catalog YAML file."""

    def _write(payload: Any, name: str = "suggestions.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    """Write the default test template and return its path."""

    path = tmp_path / "suggestions.template.md"
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path
