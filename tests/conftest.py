# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from msgsync.catalog import Catalog, CatalogStore, JsonSerializer, Message, SignStore


@dataclass
class RecordingLogger:
    """Collect runner messages by level instead of printing them."""

    records: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def ok(self, message: str) -> None:
        self.records.append(("ok", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def fail(self, message: str) -> None:
        self.records.append(("fail", message))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def messages(self, level: str) -> list[str]:
        return [message for recorded, message in self.records if recorded == level]


def make_catalog(**entries: str) -> Catalog:
    """Build a catalog of ``other``-only messages with content fingerprints."""

    return Catalog.from_messages(Message(id=key, other=value) for key, value in entries.items()).refresh_fingerprints()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Return a logger that records runner output."""
    return RecordingLogger()


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Return the default locale directory beneath ``tmp_path``."""
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture
def json_store(locale_dir: Path) -> CatalogStore:
    """Return a JSON catalog store bound to ``locale_dir``."""
    return CatalogStore(locale_dir, JsonSerializer())


@pytest.fixture
def json_signs(locale_dir: Path) -> SignStore:
    """Return a JSON signature store bound to ``locale_dir``."""
    return SignStore(locale_dir, JsonSerializer())


@pytest.fixture
def catalog_of() -> Callable[..., Catalog]:
    """Return the :func:`make_catalog` factory."""
    return make_catalog
