# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog YAML documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Final, TextIO, cast

import yaml

from ..errors import MalformedCatalogError
from .types import VERSION_KEY, YAMLValue

YAML_STR_TAG: Final[str] = "tag:yaml.org,2002:str"
NUMERIC_TAGS: Final[frozenset[str]] = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})


def load_schema(path: Path) -> Mapping[str, YAMLValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, YAMLValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        ValueError: If the schema is not a JSON object.
    """

    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        payload = json.load(stream)
    if not isinstance(payload, Mapping):
        raise ValueError(f"{path}: expected a JSON object")
    return cast(Mapping[str, YAMLValue], payload)


def load_document(path: Path) -> YAMLValue:
    """Load a catalog YAML document from disk.

    Args:
        path: Filesystem path to the catalog document.

    Returns:
        YAMLValue: Parsed YAML payload.

    Raises:
        MalformedCatalogError: If the document is missing, unreadable or not valid YAML.
    """

    if not path.is_file():
        raise MalformedCatalogError("catalog file not found", path=path)
    try:
        with path.open("r", encoding="utf-8") as stream:
            payload = _load_yaml(stream)
    except OSError as exc:
        raise MalformedCatalogError(f"unable to read catalog ({exc.strerror})", path=path) from exc
    except UnicodeDecodeError as exc:
        raise MalformedCatalogError("catalog is not valid UTF-8", path=path) from exc
    except yaml.YAMLError as exc:
        raise MalformedCatalogError(f"failed to parse catalog YAML: {_describe_yaml_error(exc)}", path=path) from exc
    return cast(YAMLValue, payload)


def _load_yaml(stream: TextIO) -> object:
    """Parse ``stream`` with the safe loader, keeping a numeric ``version`` as written.

    A numeric ``version`` scalar is retagged as a string before construction,
    so ``version: 1.10`` loads as ``"1.10"`` rather than the float ``1.1``.
    """

    loader = yaml.SafeLoader(stream)
    try:
        node = loader.get_single_node()
        if node is None:
            return None
        if isinstance(node, yaml.MappingNode):
            for key_node, value_node in node.value:
                if (
                    isinstance(key_node, yaml.ScalarNode)
                    and key_node.value == VERSION_KEY
                    and isinstance(value_node, yaml.ScalarNode)
                    and value_node.tag in NUMERIC_TAGS
                ):
                    value_node.tag = YAML_STR_TAG
        return loader.construct_document(node)
    finally:
        loader.dispose()


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    """Return a one-line description of a PyYAML parse failure."""

    if isinstance(exc, yaml.MarkedYAMLError) and exc.problem_mark is not None:
        mark = exc.problem_mark
        problem = exc.problem or "syntax error"
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return str(exc).splitlines()[0] if str(exc) else type(exc).__name__


__all__ = ["load_document", "load_schema"]
