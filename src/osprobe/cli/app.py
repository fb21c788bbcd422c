# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the osprobe commands."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.tree import Tree

from ..catalog.builtin import BUILTIN_CATALOG
from ..catalog.model import OperatingSystem
from ..config import ConfigError, ProbeSettings, load_settings
from ..errors import OsProbeError
from ..platform import OVERRIDE_FORMS, Platform, guess, parse_override, resolve
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    JSON_OPTION,
    LSB_RELEASE_OPTION,
    OS_RELEASE_OPTION,
    PROPERTY_OPTION,
    ROOT_OPTION,
)
from .shared import CLIError, CLILogger, build_cli_logger, parse_properties

app = typer.Typer(
    name="osprobe",
    help="Identify the host operating system, architecture, distribution and version.",
    no_args_is_help=True,
    add_completion=False,
)

CONFIG_EXIT_CODE = 2


@dataclass(slots=True)
class ProbeCLIOptions:
    """Capture the settings-related options shared by the probing commands."""

    root: Path
    config: Path | None
    properties: tuple[str, ...]
    os_release: str | None
    lsb_release: str | None

    def overrides(self) -> dict[str, Any]:
        """Return the settings fragment expressed by these options."""

        fragment: dict[str, Any] = {}
        properties = parse_properties(self.properties)
        if properties:
            fragment["properties"] = properties
        if self.os_release is not None:
            fragment["os_release_path"] = self.os_release
        if self.lsb_release is not None:
            fragment["lsb_release_path"] = self.lsb_release
        return fragment


def _load_settings(options: ProbeCLIOptions, logger: CLILogger) -> ProbeSettings:
    try:
        settings = load_settings(options.root, config_path=options.config, overrides=options.overrides())
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=CONFIG_EXIT_CODE) from exc
    logger.debug(
        f"override={settings.override!r} properties={settings.properties!r} "
        f"os_release={settings.os_release_path!r} lsb_release={settings.lsb_release_path!r}",
    )
    return settings


def _exit_on_error(exc: CLIError | OsProbeError, logger: CLILogger) -> typer.Exit:
    logger.fail(str(exc))
    return typer.Exit(code=exc.exit_code if isinstance(exc, CLIError) else 1)


def _emit_platforms(platforms: Sequence[Platform], notes: Sequence[str], *, as_json: bool, logger: CLILogger) -> None:
    if as_json:
        payload = {"platforms": [platform.as_dict() for platform in platforms], "notes": list(notes)}
        logger.echo(json.dumps(payload, indent=2))
        return
    for note in notes:
        logger.warn(note)
    for platform in platforms:
        logger.ok(platform.describe())


@app.command("detect")
def detect_command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    properties: PROPERTY_OPTION = None,
    os_release: OS_RELEASE_OPTION = None,
    lsb_release: LSB_RELEASE_OPTION = None,
    as_json: JSON_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Detect the single most plausible platform of this host."""

    logger = build_cli_logger(emoji=use_emoji, debug=debug)
    options = ProbeCLIOptions(root, config, tuple(properties or ()), os_release, lsb_release)
    try:
        detection = resolve(BUILTIN_CATALOG, _load_settings(options, logger))
    except (CLIError, OsProbeError) as exc:
        raise _exit_on_error(exc, logger) from exc
    _emit_platforms((detection.platform,), detection.notes, as_json=as_json, logger=logger)


@app.command("guess")
def guess_command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    properties: PROPERTY_OPTION = None,
    os_release: OS_RELEASE_OPTION = None,
    lsb_release: LSB_RELEASE_OPTION = None,
    as_json: JSON_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """List every plausible platform of this host, highest priority first."""

    logger = build_cli_logger(emoji=use_emoji, debug=debug)
    options = ProbeCLIOptions(root, config, tuple(properties or ()), os_release, lsb_release)
    try:
        settings = _load_settings(options, logger)
        if settings.override is not None:
            platforms = [parse_override(BUILTIN_CATALOG, settings.override)]
        else:
            platforms = guess(BUILTIN_CATALOG, settings.extractors())
    except (CLIError, OsProbeError) as exc:
        raise _exit_on_error(exc, logger) from exc
    _emit_platforms(platforms, (), as_json=as_json, logger=logger)


@app.command("parse")
def parse_command(
    override: Annotated[str, typer.Argument(help="OS|ARCH or OS|ARCH|DISTRIBUTION|VERSION")],
    as_json: JSON_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
) -> None:
    """Validate an override string against the catalog."""

    logger = build_cli_logger(emoji=use_emoji)
    try:
        platform = parse_override(BUILTIN_CATALOG, override)
    except OsProbeError as exc:
        raise _exit_on_error(exc, logger) from exc
    _emit_platforms((platform,), (), as_json=as_json, logger=logger)


def _catalog_tree(catalog: Sequence[OperatingSystem]) -> Tree:
    tree = Tree("catalog")
    for operating_system in catalog:
        os_branch = tree.add(operating_system.name)
        arch_branch = os_branch.add("architectures")
        for architecture in operating_system.architectures:
            arch_branch.add(architecture.name)
        if not operating_system.distributions:
            continue
        dist_branch = os_branch.add("distributions")
        for distribution in operating_system.distributions:
            versions_branch = dist_branch.add(distribution.name)
            for version in distribution.versions:
                label = version.name if not version.priority else f"{version.name} (priority {version.priority})"
                versions_branch.add(label)
    return tree


@app.command("catalog")
def catalog_command(use_emoji: EMOJI_OPTION = True) -> None:
    """Show the identifiers accepted in override strings."""

    logger = build_cli_logger(emoji=use_emoji)
    logger.info(f"override forms: {OVERRIDE_FORMS}")
    logger.console.print(_catalog_tree(BUILTIN_CATALOG))


def main() -> None:
    """Run the osprobe CLI."""

    app()


__all__ = ["app", "main"]
