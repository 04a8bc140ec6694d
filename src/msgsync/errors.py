# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by msgsync operations."""

from __future__ import annotations


class MsgsyncError(RuntimeError):
    """Base class for failures raised by catalog extraction and synchronisation."""


class ConfigError(MsgsyncError):
    """Raised when configuration input is invalid or incomplete."""


class CatalogIntegrityError(MsgsyncError):
    """Raised when a catalog or signature document cannot be decoded."""


class SourceCatalogMissingError(CatalogIntegrityError):
    """Raised when the default-language catalog has not been extracted yet."""


__all__ = (
    "CatalogIntegrityError",
    "ConfigError",
    "MsgsyncError",
    "SourceCatalogMissingError",
)
