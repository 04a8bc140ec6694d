# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog model, fingerprints, serialisers and on-disk stores."""

from __future__ import annotations

from .checksum import compute_fingerprint
from .model import Catalog, Message
from .serializers import CatalogSerializer, JsonSerializer, YamlSerializer, get_serializer
from .signatures import SignStore
from .store import CatalogStore, staging_name

__all__ = (
    "Catalog",
    "CatalogSerializer",
    "CatalogStore",
    "JsonSerializer",
    "Message",
    "SignStore",
    "YamlSerializer",
    "compute_fingerprint",
    "get_serializer",
    "staging_name",
)
