# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Persistence for per-target content signatures."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..constants import SIGNATURE_EXTENSION
from .io import read_document, remove_document, write_atomic
from .serializers import CatalogSerializer, decode_signatures, encode_signatures
from .types import SignaturePayload


class SignStore:
    """Load and save the identifier to fingerprint mapping of target catalogs.

    Signatures are encoded with the same serialiser as the catalogs so the
    store round-trips regardless of the configured format.
    """

    def __init__(self, directory: Path, serializer: CatalogSerializer) -> None:
        """Bind the store to ``directory`` and ``serializer``.

        Args:
            directory: Locale directory holding ``<target>.sign`` files.
            serializer: Serialiser shared with the catalog files.
        """

        self._directory = directory
        self._serializer = serializer

    def path_for(self, target: str) -> Path:
        """Return the signature file location for ``target``."""

        return self._directory / f"{target}.{SIGNATURE_EXTENSION}"

    def load(self, target: str) -> SignaturePayload:
        """Return the recorded signatures for ``target``.

        Args:
            target: Target language code.

        Returns:
            SignaturePayload: Recorded signatures; empty when the file is absent
            or zero bytes long.

        Raises:
            CatalogIntegrityError: If the file exists but cannot be decoded.
        """

        path = self.path_for(target)
        data = read_document(path)
        if not data:
            return {}
        return decode_signatures(self._serializer, data, context=str(path))

    def save(self, target: str, signatures: Mapping[str, str]) -> Path | None:
        """Persist ``signatures`` for ``target``.

        An empty mapping removes the store instead of writing an empty file.

        Args:
            target: Target language code.
            signatures: Identifier to fingerprint mapping to persist.

        Returns:
            Path | None: Written file, or ``None`` when the store was removed.
        """

        path = self.path_for(target)
        if not signatures:
            remove_document(path)
            return None
        write_atomic(path, encode_signatures(self._serializer, signatures))
        return path

    def remove(self, target: str) -> bool:
        """Delete the signature file for ``target`` and report whether one existed."""

        return remove_document(self.path_for(target))


__all__ = ["SignStore"]
