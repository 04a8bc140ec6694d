# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Write the default-language catalog from scanned source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..catalog.serializers import get_serializer
from ..catalog.store import CatalogStore
from ..config import SyncConfig
from ..console import ConsoleLogger
from ..reporting import RunLogger
from .scanner import ScanResult, scan_paths


@dataclass(slots=True)
class ExtractOutcome:
    """Scan result paired with the catalog file it produced, if any."""

    scan: ScanResult
    written: Path | None = None


def extract_catalog(config: SyncConfig, *, logger: RunLogger | None = None) -> ExtractOutcome:
    """Scan the configured paths and write ``<default>.<ext>`` to the locale directory.

    Nothing is written when no message is found.

    Args:
        config: Resolved configuration.
        logger: Sink for progress messages.

    Returns:
        ExtractOutcome: Scan details and the written catalog path.

    Raises:
        ConfigError: If the output format is unsupported.
        OSError: If the locale directory or catalog cannot be written.
    """

    log = logger or ConsoleLogger()
    serializer = get_serializer(config.outformat)
    roots = config.scan_roots
    for root in roots:
        log.info(f"Scanning {root}")
        if not root.exists():
            log.warn(f"Scan path {root} does not exist")

    scan = scan_paths(roots, ignore_test_files=config.ignore_test_files)
    for path, reason in scan.file_errors:
        log.warn(f"Skipped {path}: {reason}")
    for skipped in scan.skipped:
        log.warn(f"{skipped.path}:{skipped.line}: {skipped.reason}")
    for message_id in dict.fromkeys(scan.duplicates):
        log.warn(f"Message '{message_id}' is defined more than once; keeping the last definition")

    log.info(f"Processed {scan.files_scanned} file(s)")
    if not scan.catalog:
        log.info("No messages found; nothing written")
        return ExtractOutcome(scan=scan)

    locale_dir = config.locale_dir
    if not locale_dir.exists():
        log.debug(f"creating directory path={locale_dir}")
        locale_dir.mkdir(parents=True, exist_ok=True)

    store = CatalogStore(locale_dir, serializer)
    written = store.write_catalog(config.default_language, scan.catalog)
    log.ok(f"Found {len(scan.catalog)} message(s); wrote {written}")
    return ExtractOutcome(scan=scan, written=written)


__all__ = ["ExtractOutcome", "extract_catalog"]
