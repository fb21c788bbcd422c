# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, option parsing)."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn

LIBRARY_LOGGER_NAME: Final[str] = "osprobe"


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


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w.-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple ``key=value`` highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def _ensure_library_debug_logger() -> None:
    """Stream debug records of the ``osprobe`` loggers to stderr."""

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if getattr(library_logger, "_osprobe_debug_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(logging.DEBUG)
    library_logger.propagate = False
    setattr(library_logger, "_osprobe_debug_configured", True)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    When ``debug`` is set, library loggers under ``osprobe`` also stream their
    debug records to stderr.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False)
    if debug:
        _ensure_library_debug_logger()
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


def parse_properties(values: Sequence[str] | None) -> dict[str, str]:
    """Parse repeated ``NAME=VALUE`` options into a mapping.

    Raises:
        CLIError: If an entry lacks the ``=`` separator or a name.
    """

    properties: dict[str, str] = {}
    for entry in values or ():
        name, separator, value = entry.partition("=")
        name = name.strip()
        if not separator or not name:
            raise CLIError(f"invalid property '{entry}': expected NAME=VALUE", exit_code=2)
        properties[name] = value.strip()
    return properties


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "parse_properties"]
