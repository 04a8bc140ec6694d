# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for terminal output of the console logger."""

from __future__ import annotations

import pytest

from msgsync.console import ConsoleLogger, highlight_pairs


def test_plain_output_without_emoji_or_colour(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLogger(use_emoji=False, use_color=False)

    logger.info("scanning")
    logger.warn("careful")
    logger.fail("broken")
    logger.debug("hidden")

    assert capsys.readouterr().out == "scanning\ncareful\nbroken\n"


def test_emoji_prefixes_level(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleLogger(use_color=False).ok("done")

    assert capsys.readouterr().out == "✅ done\n"


def test_debug_printed_when_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleLogger(use_emoji=False, use_color=False, verbose=True).debug("language=fr source=3")

    assert capsys.readouterr().out == "[debug] language=fr source=3\n"


def test_highlight_pairs_styles_keys_and_values() -> None:
    text = highlight_pairs("run language=fr done")

    assert text.plain == "run language=fr done"
    styled = {text.plain[span.start : span.end]: str(span.style) for span in text.spans}
    assert styled["language"] == "bold magenta"
    assert styled["fr"] == "bold green"
