# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, ValidationError, best_match

from ..errors import MalformedCatalogError
from .io import load_schema
from .types import YAMLValue
from .utils import field_path, index_path

SCHEMA_FILENAME: Final[str] = "suggestion_catalog.schema.json"
DEFAULT_SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schema" / SCHEMA_FILENAME


@dataclass(slots=True)
class SchemaRepository:
    """Hold the JSON schema validator for suggestion catalogs."""

    schema_path: Path
    catalog_validator: Draft202012Validator

    @classmethod
    def load(cls, schema_path: Path | None = None) -> SchemaRepository:
        """Load the catalog schema validator from disk.

        Args:
            schema_path: Optional override for the bundled schema file.

        Returns:
            SchemaRepository: Repository configured with the catalog validator.

        Raises:
            MalformedCatalogError: If the schema file is missing, is not a JSON
                object or is not a valid Draft 2020-12 schema.
        """

        resolved = schema_path or DEFAULT_SCHEMA_PATH
        try:
            schema = load_schema(resolved)
            Draft202012Validator.check_schema(schema)
        except OSError as exc:
            reason = exc.strerror or "file not found"
            raise MalformedCatalogError(f"unable to read catalog schema ({reason})", path=resolved) from exc
        except ValueError as exc:
            raise MalformedCatalogError(f"unable to parse catalog schema ({exc})", path=resolved) from exc
        except SchemaError as exc:
            raise MalformedCatalogError(f"invalid catalog schema: {exc.message}", path=resolved) from exc
        return cls(schema_path=resolved, catalog_validator=Draft202012Validator(schema))

    def validate(self, document: YAMLValue) -> None:
        """Validate ``document`` against the catalog schema.

        Args:
            document: Parsed catalog payload.

        Raises:
            MalformedCatalogError: When the document violates the schema. The
                error names the location of the most relevant violation.
        """

        error = best_match(self.catalog_validator.iter_errors(document))
        if error is None:
            return
        raise MalformedCatalogError(error.message, field=describe_location(error))


def describe_location(error: ValidationError) -> str | None:
    """Return the dotted catalog location targeted by ``error``.

    ``required`` violations point at the mapping missing the key, so the
    missing key is appended to make the location name the absent field.

    Args:
        error: Validation error reported by ``jsonschema``.

    Returns:
        str | None: Location such as ``operations_with_alternatives[0].steps``
        or ``None`` when the error concerns the document root.
    """

    location = _join_path(error.absolute_path)
    if error.validator == "required" and isinstance(error.instance, Mapping):
        required = error.validator_value if isinstance(error.validator_value, list) else []
        missing = [name for name in required if name not in error.instance]
        if missing:
            location = field_path(location, str(missing[0]))
    return location or None


def _join_path(parts: Iterable[str | int]) -> str:
    """Render a ``jsonschema`` path deque using dotted and indexed notation."""

    location = ""
    for part in parts:
        location = index_path(location, part) if isinstance(part, int) else field_path(location, part)
    return location


__all__ = ["DEFAULT_SCHEMA_PATH", "SchemaRepository", "describe_location"]
