# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising catalog YAML structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..errors import MalformedCatalogError
from .types import YAMLValue


def field_path(context: str, key: str) -> str:
    """Return the dotted location of ``key`` below ``context``.

    Args:
        context: Location of the enclosing mapping (empty for the document root).
        key: Key nested inside the enclosing mapping.

    Returns:
        str: Location such as ``operations_with_alternatives[0].category``.
    """

    return f"{context}.{key}" if context else key


def index_path(context: str, index: int) -> str:
    """Return the location of item ``index`` inside the sequence at ``context``."""

    return f"{context}[{index}]"


def expect_string(value: YAMLValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as a string or raise a catalog error.

    Args:
        value: Raw YAML value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Location of the mapping holding ``key``.

    Returns:
        str: Validated string value.

    Raises:
        MalformedCatalogError: If ``value`` is missing or not a string.
    """

    location = field_path(context, key)
    if value is None:
        raise MalformedCatalogError(f"missing required field '{key}'", field=location)
    if not isinstance(value, str):
        raise MalformedCatalogError(f"expected '{key}' to be a string", field=location)
    return value


def optional_string(value: YAMLValue | None, *, key: str, context: str, default: str = "") -> str:
    """Return ``value`` as a string, falling back to ``default`` when absent.

    Raises:
        MalformedCatalogError: If ``value`` is present but not a string.
    """

    if value is None:
        return default
    if not isinstance(value, str):
        raise MalformedCatalogError(
            f"expected '{key}' to be a string if present",
            field=field_path(context, key),
        )
    return value


def expect_bool(value: YAMLValue | None, *, key: str, context: str) -> bool:
    """Return ``value`` as a boolean or raise a catalog error.

    Args:
        value: Raw YAML value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Location of the mapping holding ``key``.

    Returns:
        bool: Validated boolean value.

    Raises:
        MalformedCatalogError: If ``value`` is missing or not a boolean.
    """

    location = field_path(context, key)
    if value is None:
        raise MalformedCatalogError(f"missing required field '{key}'", field=location)
    if not isinstance(value, bool):
        raise MalformedCatalogError(f"expected '{key}' to be a boolean", field=location)
    return value


def optional_bool(value: YAMLValue | None, *, key: str, context: str, default: bool = False) -> bool:
    """Return ``value`` as a boolean, falling back to ``default`` when absent.

    Raises:
        MalformedCatalogError: If ``value`` is present but not a boolean.
    """

    if value is None:
        return default
    if not isinstance(value, bool):
        raise MalformedCatalogError(
            f"expected '{key}' to be a boolean if present",
            field=field_path(context, key),
        )
    return value


def optional_int(value: YAMLValue | None, *, key: str, context: str) -> int | None:
    """Return ``value`` as an optional integer.

    Raises:
        MalformedCatalogError: If ``value`` is present but not an integer.
    """

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedCatalogError(
            f"expected '{key}' to be an integer if present",
            field=field_path(context, key),
        )
    return value


def expect_mapping(value: YAMLValue | None, *, key: str, context: str) -> Mapping[str, YAMLValue]:
    """Return ``value`` as a mapping or raise a catalog error.

    Args:
        value: Raw YAML value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Location of the value inside the catalog.

    Returns:
        Mapping[str, YAMLValue]: Mapping derived from ``value``.

    Raises:
        MalformedCatalogError: If ``value`` is not a mapping.
    """

    if not isinstance(value, Mapping):
        raise MalformedCatalogError(f"expected '{key}' to be a mapping", field=context or None)
    return value


def expect_sequence(value: YAMLValue | None, *, key: str, context: str) -> Sequence[YAMLValue]:
    """Return ``value`` as a sequence or raise a catalog error.

    Args:
        value: Raw YAML value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Location of the mapping holding ``key``.

    Returns:
        Sequence[YAMLValue]: Sequence derived from ``value``.

    Raises:
        MalformedCatalogError: If ``value`` is missing or not a sequence.
    """

    location = field_path(context, key)
    if value is None:
        raise MalformedCatalogError(f"missing required field '{key}'", field=location)
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise MalformedCatalogError(f"expected '{key}' to be a sequence", field=location)
    return value


__all__ = [
    "expect_bool",
    "expect_mapping",
    "expect_sequence",
    "expect_string",
    "field_path",
    "index_path",
    "optional_bool",
    "optional_int",
    "optional_string",
]
