# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and ``pyproject.toml`` loading for lockdocs."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ReportError
from .report.pipeline import DEFAULT_DATE_FORMAT, ReportPaths

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lockdocs"

DEFAULT_CATALOG_PATH: Final[Path] = Path("internal/suggester/suggestions.yaml")
DEFAULT_TEMPLATE_PATH: Final[Path] = Path("docs/design/suggestions.template.md")
DEFAULT_OUTPUT_PATH: Final[Path] = Path("docs/design/suggestions.md")


class ConfigError(ReportError):
    """Raised when configuration input is invalid."""

    component = "config"


class ReportConfig(BaseModel):
    """Locations and formatting options for report generation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog: Path = Field(default=DEFAULT_CATALOG_PATH)
    template: Path = Field(default=DEFAULT_TEMPLATE_PATH)
    output: Path = Field(default=DEFAULT_OUTPUT_PATH)
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, min_length=1)

    @field_validator("catalog", "template", "output", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return os.path.expanduser(os.path.expandvars(value))
        return value

    def resolve(self, root: Path) -> ReportPaths:
        """Return the configured locations anchored at ``root``.

        Args:
            root: Project root that relative paths are resolved against.

        Returns:
            ReportPaths: Absolute catalog, template and output locations.
        """

        return ReportPaths(
            catalog=_anchor(self.catalog, root),
            template=_anchor(self.template, root),
            output=_anchor(self.output, root),
        )

    def with_overrides(self, **overrides: Any) -> ReportConfig:
        """Return a copy with every non-``None`` override applied.

        Raises:
            ConfigError: If an override fails validation.
        """

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return _validate({**self.model_dump(), **updates}, source="command line")


def load_config(root: Path) -> ReportConfig:
    """Return the configuration declared in ``root/pyproject.toml``.

    Missing files or a missing ``[tool.lockdocs]`` table yield the defaults.

    Args:
        root: Project root containing ``pyproject.toml``.

    Returns:
        ReportConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be parsed or the section is invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return ReportConfig()
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"unable to read configuration ({exc})", path=pyproject) from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return ReportConfig()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return ReportConfig()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] must be a table", path=pyproject)
    return _validate(_normalise_keys(section), source=str(pyproject), path=pyproject)


def _normalise_keys(section: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``section`` with dashed keys rewritten to underscores."""

    return {str(key).replace("-", "_"): value for key, value in section.items()}


def _validate(payload: Mapping[str, Any], *, source: str, path: Path | None = None) -> ReportConfig:
    try:
        return ReportConfig.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration from {source}: {problems}", path=path) from exc


def _anchor(path: Path, root: Path) -> Path:
    return path if path.is_absolute() else root / path


__all__ = [
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_TEMPLATE_PATH",
    "ConfigError",
    "ReportConfig",
    "load_config",
]
