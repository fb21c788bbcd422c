# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations shared by the osprobe commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file (osprobe.toml or pyproject.toml)."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Directory searched for configuration."),
]
PROPERTY_OPTION = Annotated[
    list[str] | None,
    typer.Option("--property", "-p", help="System property override NAME=VALUE (repeatable)."),
]
OS_RELEASE_OPTION = Annotated[
    str | None,
    typer.Option("--os-release", help="Read os-release facts from this file instead."),
]
LSB_RELEASE_OPTION = Annotated[
    str | None,
    typer.Option("--lsb-release", help="Read lsb-release facts from this file instead."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit machine-readable JSON."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Show settings and fact extraction traces."),
]

__all__ = [
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "JSON_OPTION",
    "LSB_RELEASE_OPTION",
    "OS_RELEASE_OPTION",
    "PROPERTY_OPTION",
    "ROOT_OPTION",
]
