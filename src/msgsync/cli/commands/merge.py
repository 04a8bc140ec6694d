# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command reconciling target catalogs with the default-language catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...errors import ConfigError
from ...sync import sync_languages
from ..options import (
    CommonOptions,
    ConfigFileOption,
    DefaultLanguageOption,
    NoColorOption,
    NoEmojiOption,
    OutdirOption,
    OutformatOption,
    RootOption,
    VerboseOption,
)
from ..shared import CLIError, fallback_logger, load_cli_config, logger_for


def merge_command(
    root: RootOption = Path(),
    targets: Annotated[
        list[str] | None,
        typer.Option("--target", "-t", help="Target language code; repeatable."),
    ] = None,
    default_language: DefaultLanguageOption = None,
    outdir: OutdirOption = None,
    outformat: OutformatOption = None,
    config_file: ConfigFileOption = None,
    verbose: VerboseOption = False,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """Synchronise each target catalog and its staging file with the default catalog.

    Raises:
        typer.Exit: Exit status 1 when configuration is invalid or any target failed.
    """

    common = CommonOptions(
        root=root,
        default_language=default_language,
        outdir=outdir,
        outformat=outformat,
        config_file=config_file,
        verbose=verbose,
        no_emoji=no_emoji,
        no_color=no_color,
    )
    try:
        config = load_cli_config(common, {"targets": list(targets) if targets else None})
    except CLIError as exc:
        fallback_logger(common).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger = logger_for(config)
    try:
        report = sync_languages(config, logger=logger)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    if not report.ok:
        failed = ", ".join(outcome.language for outcome in report.failed)
        logger.fail(f"Synchronisation failed for: {failed}")
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


def register(app: typer.Typer) -> None:
    """Register the ``merge`` command on ``app``."""

    app.command(name="merge", help="Reconcile target catalogs with the default-language catalog.")(merge_command)


__all__ = ["merge_command", "register"]
