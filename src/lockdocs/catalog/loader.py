# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises the suggestion catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import MalformedCatalogError
from .io import load_document
from .model_catalog import Catalog
from .schema import SchemaRepository
from .utils import expect_mapping

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SuggestionCatalogLoader:
    """Loader that validates and materialises a suggestion catalog document."""

    catalog_path: Path
    schema_path: Path | None = None
    _schemas: SchemaRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise the schema repository after dataclass setup."""

        self._schemas = SchemaRepository.load(self.schema_path)
        self.schema_path = self._schemas.schema_path

    def load(self) -> Catalog:
        """Read, validate and decode the catalog.

        Loading is all-or-nothing: either every entry decodes or an error is
        raised and nothing is returned.

        Returns:
            Catalog: Frozen catalog decoded from ``catalog_path``.

        Raises:
            MalformedCatalogError: If the file is missing, unparsable or
                violates the catalog structure.
        """

        try:
            document = load_document(self.catalog_path)
            mapping = expect_mapping(document, key="<root>", context="")
            self._schemas.validate(mapping)
            catalog = Catalog.from_mapping(mapping, source=self.catalog_path)
        except MalformedCatalogError as exc:
            if exc.path is None:
                exc.path = self.catalog_path
            raise
        LOGGER.debug(
            "loaded catalog %s version=%s with=%d without=%d",
            self.catalog_path,
            catalog.version,
            len(catalog.with_alternatives),
            len(catalog.without_alternatives),
        )
        return catalog


def load_catalog(catalog_path: Path, *, schema_path: Path | None = None) -> Catalog:
    """Return the catalog stored at ``catalog_path``.

    Args:
        catalog_path: YAML catalog document to load.
        schema_path: Optional override for the bundled JSON schema.

    Returns:
        Catalog: Decoded catalog.
    """

    return SuggestionCatalogLoader(catalog_path=catalog_path, schema_path=schema_path).load()


__all__ = ["SuggestionCatalogLoader", "load_catalog"]
