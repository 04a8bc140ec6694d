# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for locale directory layout and catalog loading rules."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from msgsync.catalog import Catalog, CatalogStore, YamlSerializer, compute_fingerprint, staging_name
from msgsync.errors import CatalogIntegrityError, SourceCatalogMissingError

CatalogFactory = Callable[..., Catalog]


def test_layout_paths(json_store: CatalogStore, locale_dir: Path) -> None:
    assert staging_name("fr") == "fr.todo"
    assert json_store.path_for("fr") == locale_dir / "fr.json"
    assert json_store.path_for(staging_name("fr")) == locale_dir / "fr.todo.json"
    assert CatalogStore(locale_dir, YamlSerializer()).path_for("fr") == locale_dir / "fr.yaml"


def test_missing_source_raises(json_store: CatalogStore) -> None:
    with pytest.raises(SourceCatalogMissingError, match="en-US.json"):
        json_store.load_source("en-US")


def test_source_fingerprints_are_computed(json_store: CatalogStore, locale_dir: Path) -> None:
    (locale_dir / "en-US.json").write_text('{"greeting": {"other": "Hello"}}', encoding="utf-8")

    source = json_store.load_source("en-US")

    assert source["greeting"].fingerprint == compute_fingerprint(source["greeting"])


def test_missing_staging_is_empty(json_store: CatalogStore) -> None:
    staging, error = json_store.load_staging("fr")
    assert len(staging) == 0
    assert error is None


def test_corrupt_staging_is_tolerated(json_store: CatalogStore, locale_dir: Path) -> None:
    (locale_dir / "fr.todo.json").write_text("{broken", encoding="utf-8")

    staging, error = json_store.load_staging("fr")

    assert len(staging) == 0
    assert isinstance(error, CatalogIntegrityError)


def test_staging_fingerprints_are_computed(json_store: CatalogStore, catalog_of: CatalogFactory) -> None:
    json_store.write_catalog("fr.todo", catalog_of(greeting="Bonjour"))

    staging, _ = json_store.load_staging("fr")

    assert staging["greeting"].fingerprint == compute_fingerprint(staging["greeting"])


def test_missing_target_is_none(json_store: CatalogStore) -> None:
    assert json_store.load_target("fr", {"greeting": "abc"}) is None


def test_target_fingerprints_come_from_signatures(json_store: CatalogStore, catalog_of: CatalogFactory) -> None:
    json_store.write_catalog("fr", catalog_of(greeting="Bonjour", farewell="Au revoir"))

    target = json_store.load_target("fr", {"greeting": "recorded"})

    assert target is not None
    assert target["greeting"].fingerprint == "recorded"
    assert target["farewell"].fingerprint == ""


def test_corrupt_target_raises(json_store: CatalogStore, locale_dir: Path) -> None:
    (locale_dir / "fr.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError, match="fr.json"):
        json_store.load_target("fr", {})


def test_write_replaces_without_leaving_temporary_files(
    json_store: CatalogStore,
    locale_dir: Path,
    catalog_of: CatalogFactory,
) -> None:
    json_store.write_catalog("fr", catalog_of(greeting="Bonjour"))
    json_store.write_catalog("fr", catalog_of(greeting="Salut"))

    assert sorted(path.name for path in locale_dir.iterdir()) == ["fr.json"]
    assert json_store.read_catalog("fr") == catalog_of(greeting="Salut")


def test_remove_catalog(json_store: CatalogStore, catalog_of: CatalogFactory) -> None:
    written = json_store.write_catalog("fr", catalog_of(greeting="Bonjour"))

    assert json_store.remove_catalog("fr") == written
    assert json_store.remove_catalog("fr") is None
    assert not written.exists()
