# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich console output for extract and merge runs."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from functools import cache
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

Level = Literal["info", "ok", "warn", "fail"]

# Emoji prefix and colour per message level.
_LEVELS: Final[dict[Level, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}
_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def _console(*, color: bool, emoji: bool, tty: bool) -> Console:
    """Return the shared console for one combination of output settings.

    The console writes to whatever ``sys.stdout`` is at print time, so cached
    instances follow stream redirection.
    """

    return Console(
        color_system="auto" if color else None,
        force_terminal=tty,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def highlight_pairs(message: str) -> Text:
    """Render ``message`` dimmed, with ``key=value`` pairs emphasised."""

    text = Text()
    cursor = 0
    for match in _KEY_VALUE_RE.finditer(message):
        start, end = match.span()
        text.append(message[cursor:start], style="dim")
        text.append(match.group(1), style="bold magenta")
        text.append("=", style="dim")
        text.append(match.group(2), style="bold green")
        cursor = end
    text.append(message[cursor:], style="dim")
    return text


@dataclass(slots=True)
class ConsoleLogger:
    """:class:`~msgsync.reporting.RunLogger` printing to the terminal.

    Attributes:
        use_emoji: Prefix each line with a level emoji.
        use_color: ``False`` disables colour; ``None`` or ``True`` colour only
            when stdout is a terminal.
        verbose: Print ``debug`` messages.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    verbose: bool = False

    @property
    def console(self) -> Console:
        """Return the console matching the logger settings."""

        tty = stdout_is_tty()
        return _console(color=self.use_color is not False and tty, emoji=self.use_emoji, tty=tty)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def ok(self, message: str) -> None:
        self._emit("ok", message)

    def warn(self, message: str) -> None:
        self._emit("warn", message)

    def fail(self, message: str) -> None:
        self._emit("fail", message)

    def debug(self, message: str) -> None:
        if not self.verbose:
            return
        line = Text("[debug] ", style="bold cyan")
        line.append_text(highlight_pairs(message))
        self.console.print(line)

    def _emit(self, level: Level, message: str) -> None:
        prefix, style = _LEVELS[level]
        console = self.console
        line = Text(f"{prefix if self.use_emoji else ''}{message}")
        if not console.no_color:
            line.stylize(style)
        console.print(line)


__all__ = ["ConsoleLogger", "highlight_pairs", "stdout_is_tty"]
