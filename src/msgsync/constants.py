# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared constants describing catalog layout and plural categories."""

from __future__ import annotations

from pathlib import Path
from typing import Final, Literal, TypeAlias

PluralCategory: TypeAlias = Literal["zero", "one", "two", "few", "many", "other"]

# CLDR order; the fingerprint depends on it.
PLURAL_CATEGORIES: Final[tuple[PluralCategory, ...]] = ("zero", "one", "two", "few", "many", "other")

DEFAULT_LANGUAGE: Final[str] = "en-US"
DEFAULT_OUTDIR: Final[Path] = Path("locales")

STAGING_SUFFIX: Final[str] = "todo"
SIGNATURE_EXTENSION: Final[str] = "sign"
QUARANTINE_SUFFIX: Final[str] = "corrupt"

PROJECT_CONFIG_FILENAME: Final[str] = ".msgsync.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"

PACKAGE_IMPORT_NAMES: Final[frozenset[str]] = frozenset({"msgsync", "msgsync.catalog", "msgsync.catalog.model"})
MESSAGE_CLASS_NAME: Final[str] = "Message"

TEST_FILE_PREFIX: Final[str] = "test_"
TEST_FILE_SUFFIX: Final[str] = "_test.py"
CONFTEST_FILENAME: Final[str] = "conftest.py"

__all__ = [
    "CONFTEST_FILENAME",
    "DEFAULT_LANGUAGE",
    "DEFAULT_OUTDIR",
    "MESSAGE_CLASS_NAME",
    "PACKAGE_IMPORT_NAMES",
    "PLURAL_CATEGORIES",
    "PROJECT_CONFIG_FILENAME",
    "PYPROJECT_FILENAME",
    "PluralCategory",
    "QUARANTINE_SUFFIX",
    "SIGNATURE_EXTENSION",
    "STAGING_SUFFIX",
    "TEST_FILE_PREFIX",
    "TEST_FILE_SUFFIX",
]
