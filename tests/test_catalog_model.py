# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the message and catalog model."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from msgsync.catalog import Catalog, Message, compute_fingerprint
from msgsync.errors import CatalogIntegrityError

CatalogFactory = Callable[..., Catalog]


def test_equality_ignores_fingerprint() -> None:
    assert Message(id="m", other="x", fingerprint="a") == Message(id="m", other="x", fingerprint="b")
    assert Message(id="m", other="x") != Message(id="m", other="y")


def test_to_payload_omits_empty_forms() -> None:
    message = Message(id="m", one="one thing", other="many things")
    assert message.to_payload() == {"one": "one thing", "other": "many things"}


def test_from_payload_accepts_bare_string() -> None:
    assert Message.from_payload("m", "Hello") == Message(id="m", other="Hello")


def test_from_payload_rejects_unknown_category() -> None:
    with pytest.raises(CatalogIntegrityError, match="unknown plural category"):
        Message.from_payload("m", {"plenty": "x"})


def test_from_payload_rejects_non_string_values() -> None:
    with pytest.raises(CatalogIntegrityError, match="expected a string"):
        Message.from_payload("m", {"other": 3})


def test_catalog_from_payload_requires_mapping() -> None:
    with pytest.raises(CatalogIntegrityError, match="expected a mapping"):
        Catalog.from_payload(["greeting"], context="fr.json")


def test_catalog_from_payload_none_is_empty() -> None:
    assert len(Catalog.from_payload(None)) == 0


def test_apply_signatures_overwrites_only_overlapping_ids() -> None:
    catalog = Catalog.from_payload({"a": {"other": "A"}, "b": {"other": "B"}})
    catalog.apply_signatures({"a": "sig-a", "zzz": "ignored"})
    assert catalog["a"].fingerprint == "sig-a"
    assert catalog["b"].fingerprint == ""


def test_refresh_fingerprints_matches_content(catalog_of: CatalogFactory) -> None:
    catalog = catalog_of(a="A", b="B")
    assert catalog.fingerprints() == {
        "a": compute_fingerprint(Message(id="a", other="A")),
        "b": compute_fingerprint(Message(id="b", other="B")),
    }


def test_copy_is_independent(catalog_of: CatalogFactory) -> None:
    original = catalog_of(a="A")
    duplicate = original.copy()
    duplicate["a"].other = "changed"
    duplicate["b"] = Message(id="b", other="B")
    assert original["a"].other == "A"
    assert "b" not in original


def test_from_messages_last_duplicate_wins() -> None:
    catalog = Catalog.from_messages([Message(id="a", other="first"), Message(id="a", other="second")])
    assert len(catalog) == 1
    assert catalog["a"].other == "second"


def test_to_payload_is_sorted_by_identifier(catalog_of: CatalogFactory) -> None:
    catalog = catalog_of(zeta="Z", alpha="A")
    assert list(catalog.to_payload()) == ["alpha", "zeta"]
