# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Message catalog extraction and translation synchronisation."""

from __future__ import annotations

from importlib import metadata

from .catalog.model import Catalog, Message

__all__ = ["Catalog", "Message", "__version__"]

try:
    __version__ = metadata.version("msgsync")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
