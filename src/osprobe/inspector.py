# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Evaluate peculiarity trees and filter catalog entries by their peculiarities.

The inspector never caches extracted facts: every evaluation re-reads the
attributes it consults.  Ambiguity in :meth:`PeculiarityInspector.find` is
not logged; it is reported through the returned :class:`Finding`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, assert_never

from .attributes.extractors import AttributeExtractorLookup
from .catalog.model import HasPeculiarities
from .errors import ResolutionError
from .matchers.lookup import MatcherLookup
from .peculiarity import AllOf, Distinct, OneOf, Peculiarity

EntryT = TypeVar("EntryT", bound=HasPeculiarities)


def _describe(entries: Iterable[object]) -> str:
    return "[" + ", ".join(str(entry) for entry in entries) + "]"


@dataclass(frozen=True, slots=True)
class Finding(Generic[EntryT]):
    """Outcome of a tolerant lookup: the chosen entry plus every eligible one."""

    candidates: tuple[EntryT, ...]
    matched: tuple[EntryT, ...]

    @property
    def value(self) -> EntryT | None:
        """Return the first eligible entry in catalog order, if any."""

        return self.matched[0] if self.matched else None

    @property
    def ambiguous(self) -> bool:
        """Return ``True`` when more than one entry was eligible."""

        return len(self.matched) > 1

    @property
    def note(self) -> str | None:
        """Return a diagnostic describing the ambiguity, ``None`` otherwise."""

        if not self.ambiguous:
            return None
        return f"more than one match: {_describe(self.matched)}, using first match {self.matched[0]}"


class PeculiarityInspector:
    """Evaluate peculiarities against an extractor chain and a matcher chain."""

    __slots__ = ("extractors", "matchers")

    def __init__(self, extractors: AttributeExtractorLookup, matchers: MatcherLookup) -> None:
        self.extractors = extractors
        self.matchers = matchers

    def evaluate(self, peculiarity: Peculiarity) -> bool:
        """Return whether ``peculiarity`` holds for the observed facts.

        Args:
            peculiarity: Predicate tree to evaluate.

        Returns:
            bool: ``True`` when the predicate holds.

        Raises:
            UnhandledKindError: If an attribute or match kind has no registered handler
                and the chain ends with the failing terminal.
        """

        match peculiarity:
            case Distinct():
                return self._evaluate_distinct(peculiarity)
            case OneOf(children=children):
                return any(self.evaluate(child) for child in children)
            case AllOf(children=children):
                return all(self.evaluate(child) for child in children)
            case _:
                assert_never(peculiarity)

    def _evaluate_distinct(self, peculiarity: Distinct[Any]) -> bool:
        value = self.extractors.extract(peculiarity.attribute)
        matcher = self.matchers.handler(peculiarity.match)
        if matcher is None:
            return False
        return matcher(value, peculiarity.match)

    def matches(self, peculiarities: Iterable[Peculiarity]) -> bool:
        """Return ``True`` when every peculiarity holds (vacuously for none)."""

        return all(self.evaluate(peculiarity) for peculiarity in peculiarities)

    def matching(self, candidates: Iterable[EntryT]) -> list[EntryT]:
        """Return the eligible ``candidates`` preserving their order."""

        return [candidate for candidate in candidates if self.matches(candidate.peculiarities)]

    def find(self, candidates: Sequence[EntryT]) -> Finding[EntryT]:
        """Return a :class:`Finding` tolerating zero or several eligible candidates.

        Args:
            candidates: Homogeneous catalog level to filter.

        Returns:
            Finding[EntryT]: Eligible entries; ``value`` is the first of them.
        """

        return Finding(candidates=tuple(candidates), matched=tuple(self.matching(candidates)))

    def match(self, candidates: Sequence[EntryT]) -> EntryT:
        """Return the single eligible candidate.

        Args:
            candidates: Homogeneous catalog level to filter.

        Returns:
            EntryT: The only entry whose peculiarities hold.

        Raises:
            ResolutionError: If no candidate or more than one candidate is eligible.
        """

        matched = self.matching(candidates)
        if not matched:
            raise ResolutionError(f"no match out of {_describe(candidates)}", candidates=candidates)
        if len(matched) > 1:
            raise ResolutionError(
                f"more than one match: {_describe(matched)} out of {_describe(candidates)}",
                candidates=candidates,
                matched=matched,
            )
        return matched[0]


def matching(
    extractors: AttributeExtractorLookup,
    matchers: MatcherLookup,
    candidates: Iterable[EntryT],
) -> list[EntryT]:
    """Return the eligible ``candidates``; see :meth:`PeculiarityInspector.matching`."""

    return PeculiarityInspector(extractors, matchers).matching(candidates)


def find(
    extractors: AttributeExtractorLookup,
    matchers: MatcherLookup,
    candidates: Sequence[EntryT],
) -> Finding[EntryT]:
    """Return a tolerant :class:`Finding`; see :meth:`PeculiarityInspector.find`."""

    return PeculiarityInspector(extractors, matchers).find(candidates)


def match(
    extractors: AttributeExtractorLookup,
    matchers: MatcherLookup,
    candidates: Sequence[EntryT],
) -> EntryT:
    """Return the single eligible candidate; see :meth:`PeculiarityInspector.match`."""

    return PeculiarityInspector(extractors, matchers).match(candidates)


__all__ = ["Finding", "PeculiarityInspector", "find", "match", "matching"]
