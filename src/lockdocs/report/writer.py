# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Atomic output writer for the rendered report."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..errors import OutputWriteFailedError


def write_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in a single rename.

    The content is written to a temporary file next to ``path`` and moved into
    place with :func:`os.replace`, so readers never observe a truncated report.

    Args:
        path: Destination file.
        content: Document text written as UTF-8.

    Raises:
        OutputWriteFailedError: If ``content`` cannot be encoded or the destination
            directory or file cannot be written. No temporary file is left behind.
    """

    if path.is_dir():
        raise OutputWriteFailedError("destination is a directory", path=path)
    try:
        payload = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise OutputWriteFailedError(f"report text cannot be encoded as UTF-8 ({exc.reason})", path=path) from exc
    temp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(payload)
        temp_path.chmod(0o644)
        os.replace(temp_path, path)
        temp_path = None
    except OSError as exc:
        raise OutputWriteFailedError(f"unable to write report ({exc.strerror or exc})", path=path) from exc
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)


__all__ = ["write_atomic"]
