# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command scanning source files into the default-language catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...extract import extract_catalog
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


def extract_command(
    root: RootOption = Path(),
    paths: Annotated[
        list[Path] | None,
        typer.Option("--path", "-p", help="File or directory to scan; repeatable. Defaults to the project root."),
    ] = None,
    ignore_test_files: Annotated[
        bool | None,
        typer.Option(
            "--ignore-test-files/--include-test-files",
            help="Skip test_*.py, *_test.py and conftest.py files. [default: ignore]",
        ),
    ] = None,
    default_language: DefaultLanguageOption = None,
    outdir: OutdirOption = None,
    outformat: OutformatOption = None,
    config_file: ConfigFileOption = None,
    verbose: VerboseOption = False,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """Find Message literals in Python sources and write the default catalog.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
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
        config = load_cli_config(
            common,
            {"paths": list(paths) if paths else None, "ignore_test_files": ignore_test_files},
        )
    except CLIError as exc:
        fallback_logger(common).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    logger = logger_for(config)
    try:
        extract_catalog(config, logger=logger)
    except OSError as exc:
        logger.fail(f"Failed to write catalog: {exc}")
        raise typer.Exit(code=1) from exc
    raise typer.Exit(code=0)


def register(app: typer.Typer) -> None:
    """Register the ``extract`` command on ``app``."""

    app.command(name="extract", help="Walk the project and extract translatable messages.")(extract_command)


__all__ = ["extract_command", "register"]
