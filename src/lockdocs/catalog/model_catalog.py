# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate models used by the suggestion catalog loader."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ..errors import MalformedCatalogError
from .model_operation import Operation, UnsupportedOperation
from .types import (
    METADATA_KEY,
    SUMMARY_KEY,
    VERSION_KEY,
    WITH_ALTERNATIVES_KEY,
    WITHOUT_ALTERNATIVES_KEY,
    YAMLValue,
)
from .utils import expect_mapping, expect_sequence, index_path, optional_int, optional_string


@dataclass(frozen=True, slots=True)
class DeclaredSummary:
    """Hand-maintained counts recorded in the catalog's ``summary`` block."""

    with_alternatives: int | None = None
    without_alternatives: int | None = None
    partial_alternatives: int | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, YAMLValue], *, context: str) -> DeclaredSummary:
        """Create a ``DeclaredSummary`` from the catalog's summary mapping."""

        return DeclaredSummary(
            with_alternatives=optional_int(
                data.get("with_safe_alternatives"),
                key="with_safe_alternatives",
                context=context,
            ),
            without_alternatives=optional_int(
                data.get("without_safe_alternatives"),
                key="without_safe_alternatives",
                context=context,
            ),
            partial_alternatives=optional_int(
                data.get("partial_alternatives"),
                key="partial_alternatives",
                context=context,
            ),
        )


@dataclass(frozen=True, slots=True)
class Catalog:
    """Materialised suggestion catalog."""

    version: str
    with_alternatives: tuple[Operation, ...]
    without_alternatives: tuple[UnsupportedOperation, ...]
    title: str = ""
    declared_summary: DeclaredSummary | None = None
    source: Path | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, YAMLValue], *, source: Path | None = None) -> Catalog:
        """Create a ``Catalog`` from the root mapping of a catalog document.

        Args:
            data: Root mapping of the catalog document.
            source: File the document was read from.

        Returns:
            Catalog: Frozen catalog with every operation decoded.

        Raises:
            MalformedCatalogError: If any part of the document is invalid.
        """

        version = _version(data.get(VERSION_KEY))
        with_entries = expect_sequence(
            data.get(WITH_ALTERNATIVES_KEY),
            key=WITH_ALTERNATIVES_KEY,
            context="",
        )
        without_entries = expect_sequence(
            data.get(WITHOUT_ALTERNATIVES_KEY),
            key=WITHOUT_ALTERNATIVES_KEY,
            context="",
        )
        operations: list[Operation] = []
        for index, entry in enumerate(with_entries):
            context = index_path(WITH_ALTERNATIVES_KEY, index)
            mapping = expect_mapping(entry, key="operation", context=context)
            operations.append(Operation.from_mapping(mapping, context=context))
        unsupported: list[UnsupportedOperation] = []
        for index, entry in enumerate(without_entries):
            context = index_path(WITHOUT_ALTERNATIVES_KEY, index)
            mapping = expect_mapping(entry, key="operation", context=context)
            unsupported.append(UnsupportedOperation.from_mapping(mapping, context=context))

        title = ""
        metadata = data.get(METADATA_KEY)
        if metadata is not None:
            metadata_mapping = expect_mapping(metadata, key=METADATA_KEY, context=METADATA_KEY)
            title = optional_string(metadata_mapping.get("title"), key="title", context=METADATA_KEY)

        declared: DeclaredSummary | None = None
        summary = data.get(SUMMARY_KEY)
        if summary is not None:
            summary_mapping = expect_mapping(summary, key=SUMMARY_KEY, context=SUMMARY_KEY)
            declared = DeclaredSummary.from_mapping(summary_mapping, context=SUMMARY_KEY)

        return Catalog(
            version=version,
            with_alternatives=tuple(operations),
            without_alternatives=tuple(unsupported),
            title=title,
            declared_summary=declared,
            source=source,
        )

    @property
    def operation_count(self) -> int:
        """Return the number of operations across both collections."""

        return len(self.with_alternatives) + len(self.without_alternatives)


def _version(value: YAMLValue | None) -> str:
    """Return the catalog version as a string."""

    if value is None:
        raise MalformedCatalogError("missing required field 'version'", field="version")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise MalformedCatalogError("expected 'version' to be a string or number", field="version")
    return str(value)


__all__ = ["Catalog", "DeclaredSummary"]
