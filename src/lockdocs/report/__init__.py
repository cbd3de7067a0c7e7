# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Report rendering pipeline for the suggestion catalog."""

from __future__ import annotations

from .pipeline import (
    RenderedReport,
    ReportPaths,
    ReportResult,
    build_placeholder_values,
    generate_report,
    render_report,
)
from .rows import (
    STEP_SEPARATOR,
    TRANSACTION_LABELS,
    build_operations_table,
    build_unsupported_table,
    format_operation_row,
    join_step_descriptions,
)
from .statistics import AggregateStatistics, compute_statistics, summary_drift
from .template import Placeholder, load_template, render_template
from .transactions import TransactionStatus, classify_transaction_safety, reduce_steps
from .writer import write_atomic

__all__ = [
    "AggregateStatistics",
    "Placeholder",
    "RenderedReport",
    "ReportPaths",
    "ReportResult",
    "STEP_SEPARATOR",
    "TRANSACTION_LABELS",
    "TransactionStatus",
    "build_operations_table",
    "build_placeholder_values",
    "build_unsupported_table",
    "classify_transaction_safety",
    "compute_statistics",
    "format_operation_row",
    "generate_report",
    "join_step_descriptions",
    "load_template",
    "reduce_steps",
    "render_report",
    "render_template",
    "summary_drift",
    "write_atomic",
]
