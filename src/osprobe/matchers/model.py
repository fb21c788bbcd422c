# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Acceptance specifications applied to observed attribute values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors import ConfigurationError
from ..release_files import LsbReleaseFile, OsReleaseFile

ValueT = TypeVar("ValueT")


@dataclass(frozen=True, slots=True)
class Match(Generic[ValueT]):
    """Base class of every acceptance specification for a ``ValueT`` fact."""


@dataclass(frozen=True, slots=True)
class MatchPattern(Match[str]):
    """Accept a string fact fully matched by ``pattern``."""

    pattern: re.Pattern[str]

    def __str__(self) -> str:
        return f"MatchPattern({self.pattern.pattern})"


@dataclass(frozen=True, slots=True)
class OsReleaseFileEntry(Match[OsReleaseFile]):
    """Accept an os-release fact whose ``key`` entry is fully matched by ``pattern``."""

    key: str
    pattern: re.Pattern[str]

    def __str__(self) -> str:
        return f"OsReleaseFileEntry({self.key}={self.pattern.pattern})"


@dataclass(frozen=True, slots=True)
class LsbReleaseFileEntry(Match[LsbReleaseFile]):
    """Accept an lsb-release fact whose ``key`` entry is fully matched by ``pattern``."""

    key: str
    pattern: re.Pattern[str]

    def __str__(self) -> str:
        return f"LsbReleaseFileEntry({self.key}={self.pattern.pattern})"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` at declaration time.

    Raises:
        ConfigurationError: If ``pattern`` is not a valid regular expression.
    """

    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"invalid pattern {pattern!r}: {exc}") from exc


def match_pattern(pattern: str) -> MatchPattern:
    """Return a :class:`MatchPattern` for ``pattern``."""

    return MatchPattern(compile_pattern(pattern))


def os_release_entry(key: str, value_pattern: str) -> OsReleaseFileEntry:
    """Return an os-release entry match for ``key``."""

    return OsReleaseFileEntry(key, compile_pattern(value_pattern))


def lsb_release_entry(key: str, value_pattern: str) -> LsbReleaseFileEntry:
    """Return an lsb-release entry match for ``key``."""

    return LsbReleaseFileEntry(key, compile_pattern(value_pattern))


__all__ = [
    "LsbReleaseFileEntry",
    "Match",
    "MatchPattern",
    "OsReleaseFileEntry",
    "compile_pattern",
    "lsb_release_entry",
    "match_pattern",
    "os_release_entry",
]
