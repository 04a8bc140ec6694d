# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Content fingerprints for catalog messages."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .model import Message


def compute_fingerprint(message: Message) -> str:
    """Return the content fingerprint for ``message``.

    Args:
        message: Message whose plural forms are hashed.

    Returns:
        str: Lowercase hex SHA-1 digest of the ordered plural forms.
    """

    return fingerprint_forms(text for _, text in message.plural_forms())


def fingerprint_forms(forms: Iterable[str]) -> str:
    """Hash plural-form texts in the order supplied.

    The identifier and any other metadata never contribute, so two messages
    carrying the same translatable content share a fingerprint.

    Args:
        forms: Plural-form texts in CLDR order; absent forms are empty strings.

    Returns:
        str: Lowercase hex SHA-1 digest.
    """

    hasher = hashlib.sha1()  # noqa: S324
    for text in forms:
        hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


__all__ = ["compute_fingerprint", "fingerprint_forms"]
