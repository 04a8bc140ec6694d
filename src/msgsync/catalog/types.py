# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Type aliases shared by catalog serialisation helpers."""

from __future__ import annotations

from typing import TypeAlias

MessagePayload: TypeAlias = dict[str, str]
CatalogPayload: TypeAlias = dict[str, MessagePayload]
SignaturePayload: TypeAlias = dict[str, str]

__all__ = ["CatalogPayload", "MessagePayload", "SignaturePayload"]
