# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Layered configuration loading (defaults, pyproject, project TOML, CLI)."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .config import SyncConfig
from .constants import PROJECT_CONFIG_FILENAME, PYPROJECT_FILENAME
from .errors import ConfigError

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "msgsync"

# Spellings accepted for compatibility with the command-line flag names.
_KEY_ALIASES: Final[dict[str, str]] = {
    "default": "default_language",
    "target": "targets",
    "path": "paths",
}
_OUTPUT_KEYS: Final[frozenset[str]] = frozenset({"verbose", "emoji", "color"})
_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


class ConfigSource(Protocol):
    """Provide a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the configuration fragment supplied by the source."""
        ...


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return {}


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        env: Mapping[str, str] | None = None,
        required: bool = False,
    ) -> None:
        self._path = path
        self.name = name or str(path)
        self._env = env if env is not None else os.environ
        self._required = required

    def load(self) -> Mapping[str, Any]:
        document = self._read()
        return _expand_env(_normalise_fragment(document, context=self.name), self._env)

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            if self._required:
                raise ConfigError(f"Configuration file {self._path} does not exist")
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {self._path} is not valid TOML: {exc}") from exc


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.msgsync]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return _expand_env(_normalise_fragment(section, context=self.name), self._env)


class ConfigLoader:
    """Merge configuration sources in order, later sources winning."""

    def __init__(self, root: Path, sources: Sequence[ConfigSource]) -> None:
        self._root = root
        self._sources = tuple(sources)

    @classmethod
    def for_root(cls, root: Path, *, config_file: Path | None = None) -> ConfigLoader:
        """Return a loader reading the standard sources beneath ``root``.

        Args:
            root: Project root directory.
            config_file: Explicit TOML file replacing ``<root>/.msgsync.toml``.

        Returns:
            ConfigLoader: Loader configured with defaults, pyproject and project sources.
        """

        resolved = root.resolve()
        project = TomlConfigSource(
            config_file if config_file is not None else resolved / PROJECT_CONFIG_FILENAME,
            required=config_file is not None,
        )
        return cls(
            resolved,
            [
                DefaultConfigSource(),
                PyProjectConfigSource(resolved / PYPROJECT_FILENAME),
                project,
            ],
        )

    def load(self, overrides: Mapping[str, Any] | None = None) -> SyncConfig:
        """Return the merged configuration.

        Args:
            overrides: Values supplied on the command line; ``None`` entries are ignored.

        Returns:
            SyncConfig: Validated configuration rooted at the loader root.

        Raises:
            ConfigError: If a source is unreadable or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            merged = _deep_merge(merged, source.load())
        if overrides:
            cli_fragment = {key: value for key, value in overrides.items() if value is not None}
            merged = _deep_merge(merged, _normalise_fragment(cli_fragment, context="command line"))
        merged["root"] = self._root
        try:
            return SyncConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(_format_validation_error(exc)) from exc


def load_config(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    config_file: Path | None = None,
) -> SyncConfig:
    """Load configuration for ``root`` applying optional CLI ``overrides``."""

    return ConfigLoader.for_root(root, config_file=config_file).load(overrides)


def _normalise_fragment(fragment: Mapping[str, Any], *, context: str) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for raw_key, value in fragment.items():
        key = str(raw_key).replace("-", "_")
        key = _KEY_ALIASES.get(key, key)
        if key in _OUTPUT_KEYS:
            result.setdefault("output", {})[key] = value
            continue
        if key == "output":
            if not isinstance(value, Mapping):
                raise ConfigError(f"{context}: 'output' must be a table")
            output = result.setdefault("output", {})
            output.update({str(name).replace("-", "_"): item for name, item in value.items()})
            continue
        if key in {"targets", "paths"} and isinstance(value, str):
            value = [value]
        result[key] = value
    return result


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    return {key: _expand_env_value(value, env) for key, value in data.items()}


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda match: _lookup_env(match, env), value)
    if isinstance(value, Mapping):
        return {key: _expand_env_value(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(item, env) for item in value]
    return value


def _lookup_env(match: re.Match[str], env: Mapping[str, str]) -> str:
    key = match.group(1) or match.group(2)
    return env.get(key, match.group(0))


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "config"
        problems.append(f"{location}: {error['msg']}")
    return "Invalid configuration: " + "; ".join(problems)


__all__ = [
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
