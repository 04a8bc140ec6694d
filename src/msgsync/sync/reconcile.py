# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Three-way reconciliation of source, staging and target catalogs.

The reconciler walks the source catalog and classifies each identifier by its
membership in the staging and target catalogs and by fingerprint comparison:

``missing``
    Not yet in the target. The source text becomes the placeholder in both
    outputs.
``edited``
    Staging content differs from the recorded target signature. A translator
    supplied new text. The target adopts it, keeping the recorded signature,
    and the staging entry is consumed.
``pending``
    Staging still holds the untouched placeholder. Both outputs keep the source
    text.
``stale``
    The source text changed since the target was aligned. The identifier is
    re-queued in staging and withheld from the target.
``current``
    Nothing changed. The target entry is carried forward.

Identifiers absent from the source are dropped from both outputs.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

from ..catalog.checksum import compute_fingerprint
from ..catalog.model import Catalog, Message


class SyncMode(str, Enum):
    """Enumerate the paths a reconciliation can take."""

    NOOP = "noop"
    BOOTSTRAP = "bootstrap"
    DIFFERENTIAL = "differential"


class Decision(str, Enum):
    """Enumerate per-identifier reconciliation outcomes."""

    MISSING = "missing"
    EDITED = "edited"
    PENDING = "pending"
    STALE = "stale"
    CURRENT = "current"


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of one reconciliation run.

    Attributes:
        mode: Path taken by the run.
        staging: New staging catalog.
        target: New target catalog.
        decisions: Decision taken for every source identifier.
        dropped: Identifiers removed because they left the source catalog.
    """

    mode: SyncMode
    staging: Catalog = field(default_factory=Catalog)
    target: Catalog = field(default_factory=Catalog)
    decisions: dict[str, Decision] = field(default_factory=dict)
    dropped: tuple[str, ...] = ()

    @property
    def signatures(self) -> dict[str, str]:
        """Return the signatures to persist alongside the new target catalog."""

        return self.target.fingerprints()

    def counts(self) -> Counter[Decision]:
        """Return how many identifiers received each decision."""

        return Counter(self.decisions.values())


def _copy(message: Message) -> Message:
    return replace(message)


def _bootstrap(source: Catalog, dropped: tuple[str, ...]) -> ReconcileResult:
    """Replace staging and target wholesale with copies of ``source``."""

    return ReconcileResult(
        mode=SyncMode.BOOTSTRAP,
        staging=source.copy(),
        target=source.copy(),
        decisions=dict.fromkeys(source, Decision.MISSING),
        dropped=dropped,
    )


def _live(message: Message) -> Message:
    """Return ``message`` with a fingerprint that matches its content."""

    fingerprint = compute_fingerprint(message)
    if message.fingerprint == fingerprint:
        return message
    return message.with_fingerprint(fingerprint)


def reconcile(
    source: Catalog,
    staging: Catalog,
    target: Catalog | None,
    signatures: Mapping[str, str],
) -> ReconcileResult:
    """Compute the next staging and target catalogs for one target language.

    Inputs are never mutated. Source and staging fingerprints are taken from
    content; target fingerprints are expected to carry the recorded signatures.

    Args:
        source: Default-language catalog extracted from code.
        staging: Entries awaiting translation from the previous run.
        target: Existing target catalog, or ``None`` when none exists yet.
        signatures: Signatures persisted after the previous run.

    Returns:
        ReconcileResult: New catalogs, per-identifier decisions and dropped ids.
    """

    if not source:
        return ReconcileResult(mode=SyncMode.NOOP)

    live_source = Catalog({key: _live(message) for key, message in source.items()})
    previous = set(staging) | set(target or ())
    dropped = tuple(sorted(previous - set(live_source)))

    if target is None or not signatures:
        return _bootstrap(live_source, dropped)

    result = ReconcileResult(mode=SyncMode.DIFFERENTIAL, dropped=dropped)
    for message_id, source_message in live_source.items():
        staged = staging.get(message_id)
        existing = target.get(message_id)
        result.decisions[message_id] = _merge_entry(result, message_id, source_message, staged, existing)
    return result


def _merge_entry(
    result: ReconcileResult,
    message_id: str,
    source_message: Message,
    staged: Message | None,
    existing: Message | None,
) -> Decision:
    """Place one identifier into ``result``; the first matching rule wins.

    Args:
        result: Result under construction.
        message_id: Identifier being placed.
        source_message: Source entry with a fingerprint matching its content.
        staged: Staging entry from the previous run, if any.
        existing: Target entry, if any, carrying its recorded signature.

    Returns:
        Decision: Classification of the identifier.
    """

    if existing is None:
        result.staging[message_id] = _copy(source_message)
        result.target[message_id] = _copy(source_message)
        return Decision.MISSING
    recorded = existing.fingerprint
    if staged is not None:
        staged = _live(staged)
        if staged.fingerprint != recorded:
            # Pinned to the recorded signature, not the hash of the staged text.
            result.target[message_id] = staged.with_fingerprint(recorded)
            return Decision.EDITED
        result.staging[message_id] = _copy(source_message)
        result.target[message_id] = _copy(source_message)
        return Decision.PENDING
    if source_message.fingerprint != recorded:
        result.staging[message_id] = _copy(source_message)
        return Decision.STALE
    result.target[message_id] = _copy(existing)
    return Decision.CURRENT


class Reconciler:
    """Injectable wrapper around :func:`reconcile`."""

    def reconcile(
        self,
        source: Catalog,
        staging: Catalog,
        target: Catalog | None,
        signatures: Mapping[str, str],
    ) -> ReconcileResult:
        """Delegate to :func:`reconcile`; see it for semantics."""

        return reconcile(source, staging, target, signatures)

    __call__ = reconcile


__all__ = ["Decision", "ReconcileResult", "Reconciler", "SyncMode", "reconcile"]
