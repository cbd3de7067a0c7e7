# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the suggestion catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

YAMLPrimitive: TypeAlias = str | int | float | bool | None
YAMLValue: TypeAlias = YAMLPrimitive | Sequence["YAMLValue"] | Mapping[str, "YAMLValue"]

VERSION_KEY: Final[str] = "version"
WITH_ALTERNATIVES_KEY: Final[str] = "operations_with_alternatives"
WITHOUT_ALTERNATIVES_KEY: Final[str] = "operations_without_alternatives"
SUMMARY_KEY: Final[str] = "summary"
METADATA_KEY: Final[str] = "metadata"

__all__ = [
    "METADATA_KEY",
    "SUMMARY_KEY",
    "VERSION_KEY",
    "WITHOUT_ALTERNATIVES_KEY",
    "WITH_ALTERNATIVES_KEY",
    "YAMLPrimitive",
    "YAMLValue",
]
