# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that renders the suggestions report."""

from __future__ import annotations

from pathlib import Path

from ....config import load_config
from ....errors import ReportError
from ....report.pipeline import generate_report
from ...options import (
    CATALOG_OPTION,
    COLOR_OPTION,
    DATE_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    OUTPUT_OPTION,
    ROOT_OPTION,
    TEMPLATE_OPTION,
    absolute_overrides,
)
from ...shared import build_cli_logger


def generate_command(
    root: ROOT_OPTION = Path("."),
    catalog: CATALOG_OPTION = None,
    template: TEMPLATE_OPTION = None,
    output: OUTPUT_OPTION = None,
    date: DATE_OPTION = None,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Render the report from the catalog and template, then write it atomically.

    Raises:
        typer.Exit: Raised with a non-zero status when any stage fails.
    """

    logger = build_cli_logger(emoji=emoji, color=color, debug=debug)
    project_root = root.resolve()
    try:
        config = load_config(project_root).with_overrides(
            **absolute_overrides(catalog=catalog, template=template, output=output),
        )
        paths = config.resolve(project_root)
        logger.debug(catalog=paths.catalog, template=paths.template, output=paths.output)
        result = generate_report(
            paths,
            generated_at=date.date() if date is not None else None,
            date_format=config.date_format,
        )
    except ReportError as exc:
        raise logger.report_failure(exc) from exc

    for message in result.drift:
        logger.warn(message)
    logger.ok(result.summary)


__all__ = ["generate_command"]
