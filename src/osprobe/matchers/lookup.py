# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Matcher strategies and the lookup chain selecting them per match kind."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable

from ..dispatch import KindLookup
from ..release_files import LsbReleaseFile, OsReleaseFile
from .model import LsbReleaseFileEntry, Match, MatchPattern, OsReleaseFileEntry


@runtime_checkable
class Matcher(Protocol):
    """Decide whether an optional observed value satisfies a match specification."""

    def __call__(self, value: Any | None, match: Any) -> bool:
        """Return ``True`` when ``value`` is accepted by ``match``."""

        raise NotImplementedError


def pattern_matcher(value: str | None, match: MatchPattern) -> bool:
    """Return ``True`` when ``value`` is present and fully matches the pattern."""

    return value is not None and match.pattern.fullmatch(value) is not None


def os_release_entry_matcher(value: OsReleaseFile | None, match: OsReleaseFileEntry) -> bool:
    """Return ``True`` when the os-release entry exists and matches."""

    if value is None:
        return False
    entry = value.get(match.key)
    return entry is not None and match.pattern.fullmatch(entry) is not None


def lsb_release_entry_matcher(value: LsbReleaseFile | None, match: LsbReleaseFileEntry) -> bool:
    """Return ``True`` when the lsb-release entry exists and matches."""

    if value is None:
        return False
    entry = value.get(match.key)
    return entry is not None and match.pattern.fullmatch(entry) is not None


class MatcherLookup(KindLookup[Matcher]):
    """Chain of matchers dispatched on the match specification's class."""

    role: ClassVar[str] = "matcher"

    __slots__ = ()

    def test(self, value: Any | None, match: Match[Any]) -> bool:
        """Apply the matcher registered for ``match`` to ``value``.

        Args:
            value: Observed fact, ``None`` when absent.
            match: Acceptance specification.

        Returns:
            bool: Matcher verdict; ``False`` when no link claims the match kind.

        Raises:
            UnhandledKindError: If the chain's failing terminal is reached.
        """

        matcher = self.handler(match)
        if matcher is None:
            return False
        return matcher(value, match)

    @classmethod
    def system_default(cls) -> MatcherLookup:
        """Return the chain covering every built-in match kind."""

        return (
            cls.with_(MatchPattern, pattern_matcher)
            .join(cls.with_(OsReleaseFileEntry, os_release_entry_matcher))
            .join(cls.with_(LsbReleaseFileEntry, lsb_release_entry_matcher))
            .join(cls.failing())
        )


__all__ = [
    "Matcher",
    "MatcherLookup",
    "lsb_release_entry_matcher",
    "os_release_entry_matcher",
    "pattern_matcher",
]
