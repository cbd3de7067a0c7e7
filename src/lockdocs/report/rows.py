# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Markdown table rows for catalogued operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Final

from ..catalog.model_operation import Operation, Step, UnsupportedOperation
from .transactions import TransactionStatus, reduce_steps

STEP_SEPARATOR: Final[str] = "; "
ROW_SEPARATOR: Final[str] = "\n"

TRANSACTION_LABELS: Final[Mapping[TransactionStatus, str]] = MappingProxyType(
    {
        TransactionStatus.ALL_SAFE: "✅ Yes",
        TransactionStatus.ALL_UNSAFE: "❌ No",
        TransactionStatus.MIXED: "⚠️ Mixed",
    },
)


def _table_row(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def join_step_descriptions(steps: Sequence[Step]) -> str:
    """Return every step description joined in order by ``STEP_SEPARATOR``."""

    return STEP_SEPARATOR.join(step.description for step in steps)


def transaction_label(status: TransactionStatus) -> str:
    """Return the display label for ``status``."""

    return TRANSACTION_LABELS[status]


def format_operation_row(operation: Operation, status: TransactionStatus) -> str:
    """Render one operation as a pipe-delimited table row.

    Args:
        operation: Operation from the "with alternatives" collection.
        status: Reduced transaction status of the operation's steps.

    Returns:
        str: Row of the form ``| name | category | steps | label |``.
    """

    return _table_row(
        (
            operation.name,
            operation.category,
            join_step_descriptions(operation.steps),
            transaction_label(status),
        ),
    )


def build_operations_table(operations: Iterable[Operation]) -> str:
    """Return the rows for ``operations`` in catalog order.

    Rows are joined by newlines without a trailing newline. Order is kept as
    given and duplicates are not collapsed.
    """

    return ROW_SEPARATOR.join(
        format_operation_row(operation, reduce_steps(operation.steps)) for operation in operations
    )


def format_unsupported_row(entry: UnsupportedOperation) -> str:
    """Render one operation without alternatives as ``| name | category | reason |``."""

    return _table_row((entry.name, entry.category, entry.reason))


def build_unsupported_table(entries: Iterable[UnsupportedOperation]) -> str:
    """Return the rows for operations without alternatives in catalog order."""

    return ROW_SEPARATOR.join(format_unsupported_row(entry) for entry in entries)


__all__ = [
    "ROW_SEPARATOR",
    "STEP_SEPARATOR",
    "TRANSACTION_LABELS",
    "build_operations_table",
    "build_unsupported_table",
    "format_operation_row",
    "format_unsupported_row",
    "join_step_descriptions",
    "transaction_label",
]
