# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Locale directory layout and catalog loading rules."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..constants import QUARANTINE_SUFFIX, STAGING_SUFFIX
from ..errors import CatalogIntegrityError, SourceCatalogMissingError
from .io import move_aside, read_document, remove_document, write_atomic
from .model import Catalog
from .serializers import CatalogSerializer, decode_catalog, encode_catalog


def staging_name(target: str) -> str:
    """Return the catalog name of the staging file for ``target``."""

    return f"{target}.{STAGING_SUFFIX}"


class CatalogStore:
    """Read and write the catalogs kept in one locale directory.

    Layout::

        <lang>.<ext>        language catalog
        <lang>.todo.<ext>   staging catalog awaiting translation

    Source and staging catalogs get fingerprints computed from their content.
    Target catalogs get fingerprints from the persisted signatures instead.
    """

    def __init__(self, directory: Path, serializer: CatalogSerializer) -> None:
        self._directory = directory
        self._serializer = serializer

    @property
    def directory(self) -> Path:
        """Return the locale directory managed by the store."""

        return self._directory

    @property
    def serializer(self) -> CatalogSerializer:
        """Return the serialiser used for every catalog file."""

        return self._serializer

    def path_for(self, name: str) -> Path:
        """Return the file path of the catalog called ``name``.

        Args:
            name: Catalog name such as ``fr`` or ``fr.todo``.

        Returns:
            Path: ``<directory>/<name>.<ext>``.
        """

        return self._directory / f"{name}.{self._serializer.extension}"

    def read_catalog(self, name: str) -> Catalog | None:
        """Decode the catalog called ``name`` without touching fingerprints.

        Returns:
            Catalog | None: Decoded catalog, or ``None`` when the file is absent.

        Raises:
            CatalogIntegrityError: If the file cannot be decoded.
            OSError: If the file exists but cannot be read.
        """

        path = self.path_for(name)
        data = read_document(path)
        if data is None:
            return None
        return decode_catalog(self._serializer, data, context=str(path))

    def load_source(self, language: str) -> Catalog:
        """Load the default-language catalog with freshly computed fingerprints.

        Raises:
            SourceCatalogMissingError: If the catalog has not been extracted yet.
            CatalogIntegrityError: If the catalog cannot be decoded.
        """

        catalog = self.read_catalog(language)
        if catalog is None:
            raise SourceCatalogMissingError(f"{self.path_for(language)}: source catalog does not exist")
        return catalog.refresh_fingerprints()

    def load_staging(self, target: str) -> tuple[Catalog, CatalogIntegrityError | None]:
        """Load the staging catalog of ``target`` with freshly computed fingerprints.

        A missing file yields an empty catalog. An undecodable file also yields
        an empty catalog, paired with the decoding error so callers can report it.

        Returns:
            tuple[Catalog, CatalogIntegrityError | None]: Staging catalog and the
            tolerated decoding error, if any.
        """

        try:
            catalog = self.read_catalog(staging_name(target))
        except CatalogIntegrityError as exc:
            return Catalog(), exc
        if catalog is None:
            return Catalog(), None
        return catalog.refresh_fingerprints(), None

    def load_target(self, target: str, signatures: Mapping[str, str]) -> Catalog | None:
        """Load the target catalog and seed fingerprints from ``signatures``.

        Entries without a recorded signature keep an empty fingerprint.

        Returns:
            Catalog | None: Target catalog, or ``None`` when no file exists yet.

        Raises:
            CatalogIntegrityError: If the catalog cannot be decoded.
        """

        catalog = self.read_catalog(target)
        if catalog is None:
            return None
        return catalog.apply_signatures(signatures)

    def write_catalog(self, name: str, catalog: Catalog) -> Path:
        """Atomically write ``catalog`` under ``name`` and return the file path."""

        path = self.path_for(name)
        write_atomic(path, encode_catalog(self._serializer, catalog))
        return path

    def remove_catalog(self, name: str) -> Path | None:
        """Delete the catalog called ``name``.

        Returns:
            Path | None: Removed file path, or ``None`` when nothing existed.
        """

        path = self.path_for(name)
        return path if remove_document(path) else None

    def quarantine_catalog(self, name: str) -> Path | None:
        """Move the catalog called ``name`` to ``<name>.<ext>.corrupt``.

        Returns:
            Path | None: Quarantined file path, or ``None`` when nothing existed.
        """

        return move_aside(self.path_for(name), QUARANTINE_SUFFIX)


__all__ = ["CatalogStore", "staging_name"]
