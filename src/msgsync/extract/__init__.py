# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Source scanning for message literals."""

from __future__ import annotations

from .runner import ExtractOutcome, extract_catalog
from .scanner import ExtractionResult, ScanResult, extract_messages, scan_paths

__all__ = (
    "ExtractOutcome",
    "ExtractionResult",
    "ScanResult",
    "extract_catalog",
    "extract_messages",
    "scan_paths",
)
