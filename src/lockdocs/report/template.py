# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Placeholder substitution for the report template."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Final

from ..errors import TemplateUnreadableError

PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")


class Placeholder(str, Enum):
    """Placeholders recognised in the report template."""

    VERSION = "VERSION"
    GENERATED_AT = "GENERATED_AT"
    TOTAL_OPERATIONS = "TOTAL_OPERATIONS"
    WITH_ALTERNATIVES = "WITH_ALTERNATIVES"
    WITHOUT_ALTERNATIVES = "WITHOUT_ALTERNATIVES"
    WITH_ALTERNATIVES_PERCENT = "WITH_ALTERNATIVES_PERCENT"
    WITHOUT_ALTERNATIVES_PERCENT = "WITHOUT_ALTERNATIVES_PERCENT"
    OPERATIONS_WITH_ALTERNATIVES_TABLE = "OPERATIONS_WITH_ALTERNATIVES_TABLE"
    PARTIAL_ALTERNATIVES = "PARTIAL_ALTERNATIVES"
    OPERATIONS_WITHOUT_ALTERNATIVES_TABLE = "OPERATIONS_WITHOUT_ALTERNATIVES_TABLE"
    CATALOG_TITLE = "CATALOG_TITLE"

    @property
    def token(self) -> str:
        """Return the literal token as written in templates, e.g. ``${VERSION}``."""

        return "${" + self.value + "}"


def render_template(template: str, values: Mapping[Placeholder, str]) -> str:
    """Substitute recognised placeholders in ``template``.

    The template is scanned once. Tokens whose name has no entry in
    ``values`` are kept verbatim, and substituted text is never rescanned, so
    values may safely contain ``${...}`` sequences of their own.

    Args:
        template: Template text containing ``${NAME}`` tokens.
        values: Replacement text keyed by placeholder.

    Returns:
        str: Rendered document.
    """

    replacements = {Placeholder(placeholder).value: text for placeholder, text in values.items()}

    def _substitute(match: re.Match[str]) -> str:
        return replacements.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def find_placeholders(template: str) -> tuple[str, ...]:
    """Return the distinct placeholder names used in ``template`` in order of appearance."""

    return tuple(dict.fromkeys(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(template)))


def load_template(path: Path) -> str:
    """Read the report template at ``path``.

    Args:
        path: Template file location.

    Returns:
        str: Template text.

    Raises:
        TemplateUnreadableError: If the file is missing, is not a regular file,
            cannot be read or is not valid UTF-8.
    """

    if not path.is_file():
        raise TemplateUnreadableError("template file not found", path=path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateUnreadableError("template is not valid UTF-8", path=path) from exc
    except OSError as exc:
        raise TemplateUnreadableError(f"unable to read template ({exc.strerror})", path=path) from exc


__all__ = [
    "PLACEHOLDER_PATTERN",
    "Placeholder",
    "find_placeholders",
    "load_template",
    "render_template",
]
