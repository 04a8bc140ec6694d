# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for message content fingerprints."""

from __future__ import annotations

import hashlib
from dataclasses import replace

import pytest

from msgsync.catalog import Message, compute_fingerprint
from msgsync.constants import PLURAL_CATEGORIES


def test_fingerprint_is_sha1_of_ordered_forms() -> None:
    message = Message(id="items", one="1 item", other="{n} items")
    expected = hashlib.sha1("1 item{n} items".encode()).hexdigest()
    assert compute_fingerprint(message) == expected


def test_fingerprint_ignores_identifier_and_existing_fingerprint() -> None:
    first = Message(id="a", other="Hello", fingerprint="stale")
    second = Message(id="b", other="Hello")
    assert compute_fingerprint(first) == compute_fingerprint(second)


@pytest.mark.parametrize("category", PLURAL_CATEGORIES)
def test_changing_any_form_changes_fingerprint(category: str) -> None:
    base = Message(id="m", other="Hello")
    changed = replace(base, **{category: "changed"})
    assert compute_fingerprint(base) != compute_fingerprint(changed)


def test_fingerprint_is_lowercase_hex() -> None:
    digest = compute_fingerprint(Message(id="m", other="Ünïcödé"))
    assert len(digest) == 40
    assert digest == digest.lower()
    int(digest, 16)


def test_empty_message_hashes_empty_string() -> None:
    assert compute_fingerprint(Message(id="m")) == hashlib.sha1(b"").hexdigest()
