# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reduce per-step transaction flags into one operation-level status."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from ..catalog.model_operation import Step


class TransactionStatus(str, Enum):
    """Operation-level classification of step transaction safety."""

    ALL_SAFE = "all_safe"
    ALL_UNSAFE = "all_unsafe"
    MIXED = "mixed"


def classify_transaction_safety(values: Iterable[bool]) -> TransactionStatus:
    """Classify the distinct set of ``can_run_in_transaction`` values.

    Only the set of observed values matters, never their order.

    Args:
        values: Transaction flags observed across an operation's steps.

    Returns:
        TransactionStatus: ``ALL_SAFE`` for ``{True}``, ``ALL_UNSAFE`` for
        ``{False}`` and ``MIXED`` when both values occur.

    Raises:
        ValueError: If ``values`` is empty.
    """

    observed = frozenset(bool(value) for value in values)
    if observed == {True}:
        return TransactionStatus.ALL_SAFE
    if observed == {False}:
        return TransactionStatus.ALL_UNSAFE
    if observed == {True, False}:
        return TransactionStatus.MIXED
    raise ValueError("cannot classify transaction safety without any steps")


def reduce_steps(steps: Sequence[Step]) -> TransactionStatus:
    """Return the transaction status for an operation's ``steps``."""

    return classify_transaction_safety(step.can_run_in_transaction for step in steps)


__all__ = ["TransactionStatus", "classify_transaction_safety", "reduce_steps"]
