# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root used to resolve configuration and relative paths."),
]
DefaultLanguageOption = Annotated[
    str | None,
    typer.Option("--default", "-d", help="Default (source) language code. [default: en-US]"),
]
OutdirOption = Annotated[
    Path | None,
    typer.Option("--outdir", help="Locale directory, relative to the project root. [default: locales]"),
]
OutformatOption = Annotated[
    str | None,
    typer.Option("--outformat", help="Catalog format: json or yaml. [default: yaml]"),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option("--config", help="Explicit TOML configuration file replacing .msgsync.toml."),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Print debug details.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in console output.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable coloured console output.")]


@dataclass(slots=True)
class CommonOptions:
    """Options accepted by every command."""

    root: Path
    default_language: str | None = None
    outdir: Path | None = None
    outformat: str | None = None
    config_file: Path | None = None
    verbose: bool = False
    no_emoji: bool = False
    no_color: bool = False

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides for the options the user passed."""

        output: dict[str, Any] = {}
        if self.verbose:
            output["verbose"] = True
        if self.no_emoji:
            output["emoji"] = False
        if self.no_color:
            output["color"] = False
        result: dict[str, Any] = {
            "default_language": self.default_language,
            "outdir": self.outdir,
            "outformat": self.outformat,
        }
        if output:
            result["output"] = output
        return result


__all__ = [
    "CommonOptions",
    "ConfigFileOption",
    "DefaultLanguageOption",
    "NoColorOption",
    "NoEmojiOption",
    "OutdirOption",
    "OutformatOption",
    "RootOption",
    "VerboseOption",
]
