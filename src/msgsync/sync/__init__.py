# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog reconciliation and per-target synchronisation runs."""

from __future__ import annotations

from .reconcile import Decision, ReconcileResult, Reconciler, SyncMode, reconcile
from .runner import SyncReport, TargetOutcome, summarize, sync_language, sync_languages

__all__ = (
    "Decision",
    "ReconcileResult",
    "Reconciler",
    "SyncMode",
    "SyncReport",
    "TargetOutcome",
    "reconcile",
    "summarize",
    "sync_language",
    "sync_languages",
)
