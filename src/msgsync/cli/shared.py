# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (errors, loggers, configuration)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import SyncConfig
from ..config_loader import load_config
from ..console import ConsoleLogger
from ..errors import ConfigError
from .options import CommonOptions


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def load_cli_config(options: CommonOptions, extra: Mapping[str, Any] | None = None) -> SyncConfig:
    """Resolve configuration for a command from files and CLI overrides.

    Args:
        options: Options shared by every command.
        extra: Command-specific overrides; ``None`` values are ignored.

    Returns:
        SyncConfig: Validated configuration.

    Raises:
        CLIError: If configuration cannot be loaded or validated.
    """

    overrides = options.overrides()
    if extra:
        overrides.update(extra)
    try:
        return load_config(options.root, overrides=overrides, config_file=options.config_file)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def fallback_logger(options: CommonOptions) -> ConsoleLogger:
    """Return a logger built from raw CLI flags, for use before configuration loads."""

    return ConsoleLogger(
        use_emoji=not options.no_emoji,
        use_color=False if options.no_color else None,
        verbose=options.verbose,
    )


def logger_for(config: SyncConfig) -> ConsoleLogger:
    """Return a logger honouring the presentation settings of ``config``."""

    output = config.output
    return ConsoleLogger(
        use_emoji=output.emoji,
        use_color=None if output.color else False,
        verbose=output.verbose,
    )


__all__ = ["CLIError", "fallback_logger", "load_cli_config", "logger_for"]
