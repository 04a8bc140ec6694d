# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Message records and the catalog mapping used throughout synchronisation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field, replace

from ..constants import PLURAL_CATEGORIES, PluralCategory
from ..errors import CatalogIntegrityError
from .checksum import compute_fingerprint
from .types import CatalogPayload, MessagePayload


@dataclass(slots=True)
class Message:
    """Localised content for one message identifier.

    Attributes:
        id: Identifier unique within a catalog.
        zero: Text for the CLDR ``zero`` category.
        one: Text for the CLDR ``one`` category.
        two: Text for the CLDR ``two`` category.
        few: Text for the CLDR ``few`` category.
        many: Text for the CLDR ``many`` category.
        other: Text for the CLDR ``other`` category.
        fingerprint: Last known content hash; empty when unknown. Never part
            of equality.
    """

    id: str
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""
    other: str = ""
    fingerprint: str = field(default="", compare=False)

    def plural_forms(self) -> tuple[tuple[PluralCategory, str], ...]:
        """Return ``(category, text)`` pairs in CLDR order."""

        return tuple((category, getattr(self, category)) for category in PLURAL_CATEGORIES)

    def to_payload(self) -> MessagePayload:
        """Return the non-empty plural forms keyed by category."""

        return {category: text for category, text in self.plural_forms() if text}

    def with_fingerprint(self, value: str) -> Message:
        """Return a copy of the message carrying ``value`` as its fingerprint."""

        return replace(self, fingerprint=value)

    def refreshed(self) -> Message:
        """Return a copy whose fingerprint matches the current content."""

        return replace(self, fingerprint=compute_fingerprint(self))

    @classmethod
    def from_payload(cls, message_id: str, payload: object) -> Message:
        """Build a message from a decoded catalog entry.

        A bare string is shorthand for the ``other`` form.

        Args:
            message_id: Identifier the entry is stored under.
            payload: Decoded value, either a string or a mapping of plural forms.

        Returns:
            Message: Message populated from ``payload`` with an empty fingerprint.

        Raises:
            CatalogIntegrityError: If ``payload`` has an unexpected shape.
        """

        if isinstance(payload, str):
            return cls(id=message_id, other=payload)
        if not isinstance(payload, Mapping):
            raise CatalogIntegrityError(f"{message_id}: expected a mapping of plural forms")
        forms: dict[str, str] = {}
        for key, value in payload.items():
            if key not in PLURAL_CATEGORIES:
                raise CatalogIntegrityError(f"{message_id}: unknown plural category {key!r}")
            if value is None:
                continue
            if not isinstance(value, str):
                raise CatalogIntegrityError(f"{message_id}.{key}: expected a string")
            forms[key] = value
        return cls(id=message_id, **forms)


class Catalog(MutableMapping[str, Message]):
    """Mapping from message identifier to :class:`Message`."""

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[str, Message] | None = None) -> None:
        self._messages: dict[str, Message] = dict(messages or {})

    @classmethod
    def from_messages(cls, messages: Iterable[Message]) -> Catalog:
        """Index ``messages`` by identifier; later duplicates replace earlier ones."""

        return cls({message.id: message for message in messages})

    @classmethod
    def from_payload(cls, payload: object, *, context: str = "catalog") -> Catalog:
        """Build a catalog from a decoded document.

        Args:
            payload: Decoded document; ``None`` is treated as an empty catalog.
            context: Human-readable label used in error messages.

        Returns:
            Catalog: Catalog whose messages carry empty fingerprints.

        Raises:
            CatalogIntegrityError: If the document is not a mapping of messages.
        """

        if payload is None:
            return cls()
        if not isinstance(payload, Mapping):
            raise CatalogIntegrityError(f"{context}: expected a mapping of message identifiers")
        messages: dict[str, Message] = {}
        for key, value in payload.items():
            if not isinstance(key, str):
                raise CatalogIntegrityError(f"{context}: message identifiers must be strings, got {key!r}")
            try:
                messages[key] = Message.from_payload(key, value)
            except CatalogIntegrityError as exc:
                raise CatalogIntegrityError(f"{context}: {exc}") from exc
        return cls(messages)

    def __getitem__(self, key: str) -> Message:
        return self._messages[key]

    def __setitem__(self, key: str, value: Message) -> None:
        self._messages[key] = value

    def __delitem__(self, key: str) -> None:
        del self._messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Catalog):
            return self._messages == other._messages
        if isinstance(other, Mapping):
            return self._messages == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Catalog({sorted(self._messages)!r})"

    def copy(self) -> Catalog:
        """Return a catalog holding independent copies of every message."""

        return Catalog({key: replace(message) for key, message in self._messages.items()})

    def refresh_fingerprints(self) -> Catalog:
        """Recompute every fingerprint from content, in place, and return ``self``."""

        for key, message in self._messages.items():
            self._messages[key] = message.refreshed()
        return self

    def apply_signatures(self, signatures: Mapping[str, str]) -> Catalog:
        """Overwrite fingerprints from ``signatures`` where identifiers overlap.

        Args:
            signatures: Persisted identifier to fingerprint mapping.

        Returns:
            Catalog: ``self`` for chaining.
        """

        for key, message in self._messages.items():
            recorded = signatures.get(key)
            if recorded is not None:
                self._messages[key] = message.with_fingerprint(recorded)
        return self

    def fingerprints(self) -> dict[str, str]:
        """Return the identifier to fingerprint mapping for every entry."""

        return {key: message.fingerprint for key, message in self._messages.items()}

    def to_payload(self) -> CatalogPayload:
        """Return a serialisable mapping sorted by identifier."""

        return {key: self._messages[key].to_payload() for key in sorted(self._messages)}


__all__ = ["Catalog", "Message"]
