# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from msgsync.config import SyncConfig
from msgsync.config_loader import ConfigLoader, DefaultConfigSource, TomlConfigSource, load_config
from msgsync.errors import ConfigError


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg.root == tmp_path.resolve()
    assert cfg.default_language == "en-US"
    assert cfg.targets == []
    assert cfg.outformat == "yaml"
    assert cfg.locale_dir == (tmp_path / "locales").resolve()
    assert cfg.scan_roots == [tmp_path.resolve()]
    assert cfg.ignore_test_files is True
    assert cfg.output.emoji is True


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "demo"

[tool.msgsync]
default = "en"
targets = ["fr", "de"]
outformat = "json"
""".strip(),
        encoding="utf-8",
    )
    (tmp_path / ".msgsync.toml").write_text('target = "es"\noutdir = "i18n"\n', encoding="utf-8")

    cfg = load_config(tmp_path)

    assert cfg.default_language == "en"
    assert cfg.targets == ["es"]
    assert cfg.outformat == "json"
    assert cfg.locale_dir == (tmp_path / "i18n").resolve()


def test_command_line_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".msgsync.toml").write_text(
        'default-language = "en"\ntargets = ["fr"]\nignore-test-files = false\nverbose = true\n',
        encoding="utf-8",
    )

    cfg = load_config(
        tmp_path,
        overrides={"default_language": None, "targets": ["de", "de", "it"], "outformat": "YAML"},
    )

    assert cfg.default_language == "en"
    assert cfg.targets == ["de", "it"]
    assert cfg.outformat == "yaml"
    assert cfg.ignore_test_files is False
    assert cfg.output.verbose is True


def test_explicit_config_file_replaces_project_file(tmp_path: Path) -> None:
    (tmp_path / ".msgsync.toml").write_text('targets = ["fr"]\n', encoding="utf-8")
    explicit = tmp_path / "ci.toml"
    explicit.write_text('targets = ["ja"]\n', encoding="utf-8")

    cfg = load_config(tmp_path, config_file=explicit)

    assert cfg.targets == ["ja"]


def test_missing_explicit_config_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, config_file=tmp_path / "absent.toml")


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / ".msgsync.toml").write_text("targets = [", encoding="utf-8")

    with pytest.raises(ConfigError, match="not valid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"outformat": "xml"},
        {"targets": ["fr", " "]},
        {"default_language": "en US"},
        {"unknown": 1},
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path, overrides=overrides)


def test_environment_variables_are_expanded(tmp_path: Path) -> None:
    config_path = tmp_path / "env.toml"
    config_path.write_text('outdir = "${LOCALE_ROOT}/locales"\ndefault = "$BASE_LANG"\n', encoding="utf-8")
    source = TomlConfigSource(config_path, env={"LOCALE_ROOT": "/srv/app", "BASE_LANG": "pt-BR"})

    fragment = source.load()

    assert fragment == {"outdir": "/srv/app/locales", "default_language": "pt-BR"}


def test_later_sources_override_earlier_ones(tmp_path: Path) -> None:
    base = tmp_path / "base.toml"
    base.write_text('default = "de"\ntargets = ["fr", "es"]\n', encoding="utf-8")
    local = tmp_path / "local.toml"
    local.write_text('target = "it"\n', encoding="utf-8")
    loader = ConfigLoader(tmp_path, [DefaultConfigSource(), TomlConfigSource(base), TomlConfigSource(local)])

    config = loader.load({"default_language": None})

    assert config.default_language == "de"
    assert config.targets == ["it"]


def test_require_targets(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="No target languages"):
        SyncConfig(root=tmp_path).require_targets()
    assert SyncConfig(root=tmp_path, targets=["fr"]).require_targets() == ["fr"]


def test_unknown_output_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".msgsync.toml").write_text("[output]\nshow-progress = false\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="output.show_progress"):
        load_config(tmp_path)
