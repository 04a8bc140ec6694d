# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-target synchronisation runs and their aggregated report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ..catalog.serializers import get_serializer
from ..catalog.signatures import SignStore
from ..catalog.store import CatalogStore, staging_name
from ..config import SyncConfig
from ..console import ConsoleLogger
from ..errors import MsgsyncError
from ..reporting import RunLogger
from .reconcile import Decision, ReconcileResult, Reconciler, SyncMode


@dataclass(slots=True)
class TargetOutcome:
    """Capture what one target language run did."""

    language: str
    result: ReconcileResult | None = None
    error: str | None = None
    written: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    quarantined: Path | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when the run completed without a fatal error."""

        return self.error is None


@dataclass(slots=True)
class SyncReport:
    """Aggregate of the outcomes of every target language."""

    outcomes: list[TargetOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every target completed."""

        return all(outcome.ok for outcome in self.outcomes)

    @property
    def failed(self) -> list[TargetOutcome]:
        """Return the outcomes that ended with a fatal error."""

        return [outcome for outcome in self.outcomes if not outcome.ok]

    def outcome_for(self, language: str) -> TargetOutcome:
        """Return the outcome recorded for ``language``.

        Raises:
            KeyError: If ``language`` was not processed.
        """

        for outcome in self.outcomes:
            if outcome.language == language:
                return outcome
        raise KeyError(language)


def summarize(result: ReconcileResult) -> str:
    """Return a one-line description of ``result`` for console output."""

    if result.mode is SyncMode.NOOP:
        return "nothing to do"
    counts = result.counts()
    parts = [f"{counts[decision]} {decision.value}" for decision in Decision if counts[decision]]
    if result.dropped:
        parts.append(f"{len(result.dropped)} dropped")
    return f"{result.mode.value}: " + (", ".join(parts) or "no entries")


def sync_language(
    config: SyncConfig,
    target: str,
    *,
    store: CatalogStore,
    signs: SignStore,
    reconciler: Reconciler | None = None,
    logger: RunLogger | None = None,
) -> TargetOutcome:
    """Reconcile ``target`` against the default-language catalog and persist the result.

    Outputs are written only after the full in-memory result is computed.

    Args:
        config: Resolved configuration naming the default language.
        target: Target language code.
        store: Catalog store bound to the locale directory.
        signs: Signature store bound to the locale directory.
        reconciler: Optional reconciler override.
        logger: Sink for progress messages.

    Returns:
        TargetOutcome: Reconciliation result and touched files.

    Raises:
        CatalogIntegrityError: If the source or target catalog, or the
            signatures, cannot be decoded.
        OSError: If reading or writing a file fails.
    """

    log = logger or ConsoleLogger()
    engine = reconciler or Reconciler()
    outcome = TargetOutcome(language=target)

    source = store.load_source(config.default_language)
    if not source:
        outcome.result = engine.reconcile(source, source, None, {})
        log.info(f"{target}: source catalog is empty, nothing to do")
        return outcome

    staging, staging_error = store.load_staging(target)
    if staging_error is not None:
        message = f"{target}: ignoring unreadable staging catalog ({staging_error})"
        outcome.warnings.append(message)
        log.warn(message)

    signatures = signs.load(target)
    target_catalog = store.load_target(target, signatures)
    log.debug(
        f"language={target} source={len(source)} staging={len(staging)} "
        f"target={'none' if target_catalog is None else len(target_catalog)} signatures={len(signatures)}"
    )

    result = engine.reconcile(source, staging, target_catalog, signatures)
    outcome.result = result
    _persist(
        target,
        result,
        store=store,
        signs=signs,
        outcome=outcome,
        quarantine_staging=staging_error is not None,
    )
    if outcome.quarantined is not None:
        message = f"{target}: kept the unreadable staging catalog as {outcome.quarantined}"
        outcome.warnings.append(message)
        log.warn(message)
    return outcome


def _persist(
    target: str,
    result: ReconcileResult,
    *,
    store: CatalogStore,
    signs: SignStore,
    outcome: TargetOutcome,
    quarantine_staging: bool = False,
) -> None:
    """Write or remove the target, signature and staging files for ``result``.

    An unreadable staging file is moved aside rather than overwritten or removed.
    """

    if result.target:
        outcome.written.append(store.write_catalog(target, result.target))
        sign_path = signs.save(target, result.signatures)
        if sign_path is not None:
            outcome.written.append(sign_path)
    else:
        removed = store.remove_catalog(target)
        if removed is not None:
            outcome.removed.append(removed)
        if signs.remove(target):
            outcome.removed.append(signs.path_for(target))

    todo = staging_name(target)
    if quarantine_staging:
        outcome.quarantined = store.quarantine_catalog(todo)
    if result.staging:
        outcome.written.append(store.write_catalog(todo, result.staging))
    else:
        removed = store.remove_catalog(todo)
        if removed is not None:
            outcome.removed.append(removed)


def sync_languages(
    config: SyncConfig,
    *,
    targets: Sequence[str] | None = None,
    reconciler: Reconciler | None = None,
    logger: RunLogger | None = None,
) -> SyncReport:
    """Synchronise every configured target language independently.

    A failure on one target is recorded in the report and does not prevent the
    remaining targets from running.

    Args:
        config: Resolved configuration.
        targets: Optional explicit target list overriding ``config.targets``.
        reconciler: Optional reconciler override shared by every target.
        logger: Sink for progress messages.

    Returns:
        SyncReport: Outcomes for every processed target.

    Raises:
        ConfigError: If no target languages are configured or the output format
            is unsupported.
    """

    log = logger or ConsoleLogger()
    languages = list(dict.fromkeys(targets)) if targets else config.require_targets()
    serializer = get_serializer(config.outformat)
    locale_dir = config.locale_dir
    store = CatalogStore(locale_dir, serializer)
    signs = SignStore(locale_dir, serializer)

    report = SyncReport()
    for language in languages:
        if language == config.default_language:
            log.warn(f"{language}: skipping target identical to the default language")
            continue
        try:
            outcome = sync_language(
                config,
                language,
                store=store,
                signs=signs,
                reconciler=reconciler,
                logger=log,
            )
        except (MsgsyncError, OSError) as exc:
            outcome = TargetOutcome(language=language, error=str(exc))
            log.fail(f"{language}: {exc}")
        else:
            if outcome.result is not None and outcome.result.mode is not SyncMode.NOOP:
                log.ok(f"{language}: {summarize(outcome.result)}")
        report.outcomes.append(outcome)
    return report


__all__ = ["SyncReport", "TargetOutcome", "summarize", "sync_language", "sync_languages"]
