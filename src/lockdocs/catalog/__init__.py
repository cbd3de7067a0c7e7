# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the suggestion catalog."""

from __future__ import annotations

from typing import Final

from ..errors import MalformedCatalogError
from .loader import SuggestionCatalogLoader, load_catalog
from .model_catalog import Catalog, DeclaredSummary
from .model_operation import Operation, Step, UnsupportedOperation

__all__: Final[tuple[str, ...]] = (
    "Catalog",
    "DeclaredSummary",
    "MalformedCatalogError",
    "Operation",
    "Step",
    "SuggestionCatalogLoader",
    "UnsupportedOperation",
    "load_catalog",
)
