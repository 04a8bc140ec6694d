# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers for reading and atomically replacing catalog documents."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def read_document(path: Path) -> bytes | None:
    """Return the raw bytes stored at ``path`` or ``None`` when it is absent.

    Args:
        path: Document location.

    Returns:
        bytes | None: File contents, or ``None`` if the file does not exist.

    Raises:
        OSError: If the file exists but cannot be read.
    """

    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def write_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` through a sibling temporary file.

    Readers observe either the previous document or the complete new one.

    Args:
        path: Destination file.
        data: Bytes to persist.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def move_aside(path: Path, suffix: str) -> Path | None:
    """Rename ``path`` to ``<path>.<suffix>``, replacing an earlier copy.

    Returns:
        Path | None: New location, or ``None`` when ``path`` did not exist.

    Raises:
        OSError: If the rename fails for a reason other than a missing file.
    """

    destination = path.with_name(f"{path.name}.{suffix}")
    try:
        os.replace(path, destination)
    except FileNotFoundError:
        return None
    return destination


def remove_document(path: Path) -> bool:
    """Delete ``path`` if present.

    Returns:
        bool: ``True`` when a file was removed.
    """

    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


__all__ = ["move_aside", "read_document", "remove_document", "write_atomic"]
