# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models for catalog extraction and synchronisation."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog.serializers import OutputFormat
from .constants import DEFAULT_LANGUAGE, DEFAULT_OUTDIR
from .errors import ConfigError


def _validate_language(value: str) -> str:
    """Return ``value`` stripped, rejecting blank or whitespace-bearing codes."""

    code = value.strip()
    if not code:
        raise ValueError("language code must not be empty")
    if any(char.isspace() for char in code):
        raise ValueError(f"language code {value!r} must not contain whitespace")
    return code


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    verbose: bool = False
    emoji: bool = True
    color: bool = True


class SyncConfig(BaseModel):
    """Primary configuration container for the extract and merge commands."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    root: Path = Field(default_factory=Path.cwd)
    default_language: str = DEFAULT_LANGUAGE
    targets: list[str] = Field(default_factory=list)
    outdir: Path = DEFAULT_OUTDIR
    outformat: OutputFormat = "yaml"
    paths: list[Path] = Field(default_factory=list)
    ignore_test_files: bool = True
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("default_language")
    @classmethod
    def _check_default_language(cls, value: str) -> str:
        return _validate_language(value)

    @field_validator("targets")
    @classmethod
    def _check_targets(cls, value: list[str]) -> list[str]:
        # Preserve order while dropping repeated codes.
        return list(dict.fromkeys(_validate_language(item) for item in value))

    @field_validator("outformat", mode="before")
    @classmethod
    def _normalise_outformat(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def locale_dir(self) -> Path:
        """Return the absolute directory holding catalog, staging and signature files."""

        return self._resolve(self.outdir)

    @property
    def scan_roots(self) -> list[Path]:
        """Return the absolute paths scanned for messages, defaulting to the project root."""

        if not self.paths:
            return [self.root.resolve()]
        return [self._resolve(path) for path in self.paths]

    def require_targets(self) -> list[str]:
        """Return the configured target languages.

        Raises:
            ConfigError: If no target language is configured.
        """

        if not self.targets:
            raise ConfigError("No target languages configured; pass --target or set 'targets'")
        return list(self.targets)

    def _resolve(self, path: Path) -> Path:
        expanded = path.expanduser()
        if expanded.is_absolute():
            return expanded
        return (self.root / expanded).resolve()


__all__ = ["ConfigError", "OutputConfig", "SyncConfig"]
