# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Pluggable catalog serialisers for the supported output formats."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Final, Literal, Protocol, TypeAlias, runtime_checkable

import yaml

from ..errors import CatalogIntegrityError, ConfigError
from .model import Catalog
from .types import SignaturePayload

OutputFormat: TypeAlias = Literal["json", "yaml"]


@runtime_checkable
class CatalogSerializer(Protocol):
    """Encode and decode structured documents for one concrete file format."""

    @property
    def extension(self) -> str:
        """Return the file extension (without the dot) used for catalog files."""
        ...

    def encode(self, payload: Mapping[str, object]) -> bytes:
        """Return ``payload`` rendered as bytes."""
        ...

    def decode(self, data: bytes) -> object:
        """Return the document decoded from ``data``.

        Raises:
            CatalogIntegrityError: If ``data`` cannot be parsed.
        """
        ...


class JsonSerializer:
    """Serialise documents as indented, key-sorted UTF-8 JSON."""

    extension: Final[str] = "json"

    def encode(self, payload: Mapping[str, object]) -> bytes:
        text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
        return f"{text}\n".encode()

    def decode(self, data: bytes) -> object:
        if not data.strip():
            return None
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogIntegrityError(f"failed to parse JSON document: {exc}") from exc


class YamlSerializer:
    """Serialise documents as block-style YAML via PyYAML's safe dumper.

    Documents are read with :class:`yaml.BaseLoader`: every scalar, including
    ``No``, ``On``, ``42`` and ``1.0``, decodes as a string.
    """

    extension: Final[str] = "yaml"

    def encode(self, payload: Mapping[str, object]) -> bytes:
        text = yaml.safe_dump(
            dict(payload),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=True,
        )
        return text.encode("utf-8")

    def decode(self, data: bytes) -> object:
        if not data.strip():
            return None
        try:
            return yaml.load(data.decode("utf-8"), Loader=yaml.BaseLoader)  # noqa: S506
        except (UnicodeDecodeError, yaml.YAMLError) as exc:
            raise CatalogIntegrityError(f"failed to parse YAML document: {exc}") from exc


_SERIALIZERS: Final[dict[str, type[JsonSerializer] | type[YamlSerializer]]] = {
    "json": JsonSerializer,
    "yaml": YamlSerializer,
}


def get_serializer(output_format: str) -> CatalogSerializer:
    """Return the serialiser registered for ``output_format``.

    Args:
        output_format: Format name, ``json`` or ``yaml``.

    Returns:
        CatalogSerializer: Serialiser instance for the format.

    Raises:
        ConfigError: If the format is not supported.
    """

    try:
        factory = _SERIALIZERS[output_format.lower()]
    except KeyError as exc:
        supported = ", ".join(sorted(_SERIALIZERS))
        raise ConfigError(f"Unsupported output format {output_format!r}; expected one of: {supported}") from exc
    return factory()


def encode_catalog(serializer: CatalogSerializer, catalog: Catalog) -> bytes:
    """Render ``catalog`` with ``serializer``, omitting empty plural forms."""

    return serializer.encode(catalog.to_payload())


def decode_catalog(serializer: CatalogSerializer, data: bytes, *, context: str) -> Catalog:
    """Decode ``data`` into a :class:`Catalog`.

    Args:
        serializer: Serialiser matching the document format.
        data: Raw document bytes.
        context: Human-readable label, usually the file path, for error messages.

    Returns:
        Catalog: Decoded catalog with empty fingerprints.

    Raises:
        CatalogIntegrityError: If the document cannot be parsed or is mis-shaped.
    """

    try:
        payload = serializer.decode(data)
    except CatalogIntegrityError as exc:
        raise CatalogIntegrityError(f"{context}: {exc}") from exc
    return Catalog.from_payload(payload, context=context)


def encode_signatures(serializer: CatalogSerializer, signatures: Mapping[str, str]) -> bytes:
    """Render ``signatures`` with the catalog serialiser."""

    return serializer.encode({key: signatures[key] for key in sorted(signatures)})


def decode_signatures(serializer: CatalogSerializer, data: bytes, *, context: str) -> SignaturePayload:
    """Decode an identifier to fingerprint mapping.

    Raises:
        CatalogIntegrityError: If the document is not a mapping of strings.
    """

    try:
        payload = serializer.decode(data)
    except CatalogIntegrityError as exc:
        raise CatalogIntegrityError(f"{context}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{context}: expected a mapping of signatures")
    signatures: SignaturePayload = {}
    for key, value in payload.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise CatalogIntegrityError(f"{context}: signature entries must map strings to strings")
        signatures[key] = value
    return signatures


__all__ = [
    "CatalogSerializer",
    "JsonSerializer",
    "OutputFormat",
    "YamlSerializer",
    "decode_catalog",
    "decode_signatures",
    "encode_catalog",
    "encode_signatures",
    "get_serializer",
]
