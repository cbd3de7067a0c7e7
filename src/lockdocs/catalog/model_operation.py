# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Operation and step models decoded from catalog entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..errors import MalformedCatalogError
from .types import YAMLValue
from .utils import (
    expect_bool,
    expect_mapping,
    expect_sequence,
    expect_string,
    field_path,
    index_path,
    optional_bool,
    optional_string,
)


@dataclass(frozen=True, slots=True)
class Step:
    """Single action performed as part of an operation's safe procedure."""

    description: str
    can_run_in_transaction: bool
    kind: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, YAMLValue], *, context: str) -> Step:
        """Create a ``Step`` from YAML data.

        Args:
            data: Mapping describing the step.
            context: Location of the step inside the catalog.

        Returns:
            Step: Frozen step definition.

        Raises:
            MalformedCatalogError: If required step fields are missing or invalid.
        """

        description = expect_string(data.get("description"), key="description", context=context)
        transactional = expect_bool(
            data.get("can_run_in_transaction"),
            key="can_run_in_transaction",
            context=context,
        )
        kind = optional_string(data.get("type"), key="type", context=context) or None
        return Step(description=description, can_run_in_transaction=transactional, kind=kind)


@dataclass(frozen=True, slots=True)
class Operation:
    """Catalogued operation that has a safe multi-step alternative."""

    name: str
    category: str
    steps: tuple[Step, ...]
    description: str = ""
    partial_alternative: bool = False

    @staticmethod
    def from_mapping(data: Mapping[str, YAMLValue], *, context: str) -> Operation:
        """Create an ``Operation`` from YAML data.

        Args:
            data: Mapping describing the operation and its steps.
            context: Location of the operation inside the catalog.

        Returns:
            Operation: Frozen operation definition.

        Raises:
            MalformedCatalogError: If the operation has no steps or a field is invalid.
        """

        name = expect_string(data.get("operation"), key="operation", context=context)
        category = expect_string(data.get("category"), key="category", context=context)
        steps_context = field_path(context, "steps")
        raw_steps = expect_sequence(data.get("steps"), key="steps", context=context)
        if not raw_steps:
            raise MalformedCatalogError(
                f"operation '{name}' must declare at least one step",
                field=steps_context,
            )
        steps: list[Step] = []
        for index, raw_step in enumerate(raw_steps):
            step_context = index_path(steps_context, index)
            mapping = expect_mapping(raw_step, key="step", context=step_context)
            steps.append(Step.from_mapping(mapping, context=step_context))
        return Operation(
            name=name,
            category=category,
            steps=tuple(steps),
            description=optional_string(data.get("description"), key="description", context=context),
            partial_alternative=optional_bool(
                data.get("partial_alternative"),
                key="partial_alternative",
                context=context,
            ),
        )

    @property
    def transaction_flags(self) -> frozenset[bool]:
        """Return the distinct ``can_run_in_transaction`` values across steps."""

        return frozenset(step.can_run_in_transaction for step in self.steps)


@dataclass(frozen=True, slots=True)
class UnsupportedOperation:
    """Catalogued operation for which no safe alternative exists."""

    name: str
    category: str = ""
    reason: str = ""

    @staticmethod
    def from_mapping(data: Mapping[str, YAMLValue], *, context: str) -> UnsupportedOperation:
        """Create an ``UnsupportedOperation`` from YAML data.

        Raises:
            MalformedCatalogError: If the entry lacks an operation name.
        """

        return UnsupportedOperation(
            name=expect_string(data.get("operation"), key="operation", context=context),
            category=optional_string(data.get("category"), key="category", context=context),
            reason=optional_string(data.get("reason"), key="reason", context=context),
        )


__all__ = ["Operation", "Step", "UnsupportedOperation"]
