# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that validates the catalog without writing the report."""

from __future__ import annotations

from pathlib import Path

from ....catalog.loader import load_catalog
from ....config import load_config
from ....errors import ReportError
from ....report.statistics import compute_statistics, summary_drift
from ...options import (
    CATALOG_OPTION,
    COLOR_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    ROOT_OPTION,
    absolute_overrides,
)
from ...shared import build_cli_logger
from .rendering import build_statistics_table, build_transaction_table


def check_command(
    root: ROOT_OPTION = Path("."),
    catalog: CATALOG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Validate the catalog and print its statistics.

    Raises:
        typer.Exit: Raised with a non-zero status when validation fails.
    """

    logger = build_cli_logger(emoji=emoji, color=color, debug=debug)
    project_root = root.resolve()
    try:
        config = load_config(project_root).with_overrides(**absolute_overrides(catalog=catalog))
        catalog_path = config.resolve(project_root).catalog
        logger.debug(catalog=catalog_path)
        loaded = load_catalog(catalog_path)
        stats = compute_statistics(loaded)
    except ReportError as exc:
        raise logger.report_failure(exc) from exc

    logger.console.print(build_statistics_table(loaded, stats))
    logger.console.print(build_transaction_table(loaded))
    if loaded.declared_summary is None:
        logger.info("No summary block declared; drift check skipped")
    for message in summary_drift(loaded, stats):
        logger.warn(message)
    logger.ok(f"Catalog {catalog_path} is valid: {stats.total} operations ({stats.with_count} with alternatives)")


__all__ = ["check_command"]
