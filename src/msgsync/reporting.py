# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Logger protocol shared by the extract and merge runners."""

from __future__ import annotations

from typing import Protocol


class RunLogger(Protocol):
    """Sink for user-facing progress messages emitted by runners."""

    def info(self, message: str) -> None:
        """Emit an informational message."""
        ...

    def ok(self, message: str) -> None:
        """Emit a success message."""
        ...

    def warn(self, message: str) -> None:
        """Emit a warning message."""
        ...

    def fail(self, message: str) -> None:
        """Emit a failure message."""
        ...

    def debug(self, message: str) -> None:
        """Emit a diagnostic message when verbose output is enabled."""
        ...


__all__ = ["RunLogger"]
