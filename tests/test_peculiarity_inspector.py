# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for peculiarity evaluation and catalog filtering."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from osprobe.attributes import AttributeExtractorLookup, SystemProperty, properties_from
from osprobe.catalog import Architecture, Version
from osprobe.errors import ResolutionError, UnhandledKindError
from osprobe.inspector import PeculiarityInspector, find, match, matching
from osprobe.matchers import Match, MatcherLookup, MatchPattern, match_pattern, os_release_entry
from osprobe.peculiarity import AllOf, Distinct, OneOf, all_of, one_of, os_arch_matches, os_name_matches
from osprobe.release_files import os_release_file

from sample_catalog import fake_facts

LINUX_X86_64 = {"os.name": "Linux", "os.arch": "x86_64"}


@dataclass(frozen=True, slots=True)
class StartsWith(Match[str]):
    """Match kind unknown to the built-in matcher chain."""

    prefix: str


class CountingProperties:
    """Extractor recording which properties were read."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values
        self.reads: list[str] = []

    def __call__(self, attribute: SystemProperty) -> str | None:
        self.reads.append(attribute.name)
        return self.values.get(attribute.name)


@pytest.fixture
def inspector(matchers: MatcherLookup) -> PeculiarityInspector:
    return PeculiarityInspector(fake_facts(LINUX_X86_64), matchers)


def test_distinct_matches_whole_value(inspector: PeculiarityInspector) -> None:
    assert inspector.evaluate(os_name_matches("Linux"))
    assert not inspector.evaluate(os_name_matches("Lin"))
    assert inspector.evaluate(os_name_matches("Lin.*"))


def test_absent_fact_is_a_non_match(inspector: PeculiarityInspector) -> None:
    assert not inspector.evaluate(Distinct(SystemProperty("os.version"), match_pattern(".*")))
    assert not inspector.evaluate(Distinct(os_release_file(), os_release_entry("NAME", ".*")))


@pytest.mark.parametrize(
    ("peculiarity", "expected"),
    [
        (all_of(), True),
        (one_of(), False),
        (all_of(all_of()), True),
        (all_of(one_of()), False),
        (one_of(all_of()), True),
        (one_of(one_of()), False),
        (one_of(one_of(), all_of(all_of())), True),
        (all_of(all_of(), one_of()), False),
    ],
)
def test_vacuous_identities_hold_at_every_depth(
    inspector: PeculiarityInspector,
    peculiarity: AllOf | OneOf,
    expected: bool,
) -> None:
    assert inspector.evaluate(peculiarity) is expected


def test_one_of_short_circuits_on_first_match(matchers: MatcherLookup) -> None:
    counting = CountingProperties(LINUX_X86_64)
    extractors = AttributeExtractorLookup.with_(SystemProperty, counting)
    inspector = PeculiarityInspector(extractors, matchers)

    assert inspector.evaluate(one_of(os_name_matches("Linux"), os_arch_matches("x86_64")))
    assert counting.reads == ["os.name"]


def test_all_of_short_circuits_on_first_miss(matchers: MatcherLookup) -> None:
    counting = CountingProperties(LINUX_X86_64)
    extractors = AttributeExtractorLookup.with_(SystemProperty, counting)
    inspector = PeculiarityInspector(extractors, matchers)

    assert not inspector.evaluate(all_of(os_name_matches("Windows"), os_arch_matches("x86_64")))
    assert counting.reads == ["os.name"]


def test_peculiarity_list_is_a_conjunction(inspector: PeculiarityInspector) -> None:
    both = (os_name_matches("Linux"), os_arch_matches("x86_64"))
    second_fails = (os_name_matches("Linux"), os_arch_matches("aarch64"))
    first_fails = (os_name_matches("Windows"), os_arch_matches("x86_64"))

    assert inspector.matches(both)
    assert not inspector.matches(second_fails)
    assert not inspector.matches(first_fails)
    assert inspector.matches(())


def test_variant_with_two_peculiarities_requires_both(inspector: PeculiarityInspector) -> None:
    strict = Architecture("X86_64_ON_LINUX", (os_arch_matches("x86_64"), os_name_matches("Windows")))
    relaxed = Architecture("X86_64_ANYWHERE", (os_arch_matches("x86_64"),))

    assert inspector.matching([strict, relaxed]) == [relaxed]


def test_unregistered_match_kind_fails_fast(inspector: PeculiarityInspector) -> None:
    peculiarity = Distinct(SystemProperty("os.name"), StartsWith("Lin"))

    with pytest.raises(UnhandledKindError, match="StartsWith"):
        inspector.evaluate(peculiarity)


def test_unclaimed_match_kind_without_terminal_is_false() -> None:
    inspector = PeculiarityInspector(
        AttributeExtractorLookup.with_(SystemProperty, properties_from(LINUX_X86_64)),
        MatcherLookup.with_(MatchPattern, lambda value, spec: True),
    )

    assert not inspector.evaluate(Distinct(SystemProperty("os.name"), StartsWith("Lin")))


def test_custom_matcher_can_be_registered(matchers: MatcherLookup) -> None:
    extended = MatcherLookup.with_(StartsWith, lambda value, spec: value is not None and value.startswith(spec.prefix))
    inspector = PeculiarityInspector(fake_facts(LINUX_X86_64), extended.join(matchers))

    assert inspector.evaluate(Distinct(SystemProperty("os.name"), StartsWith("Lin")))


def test_matching_preserves_order(inspector: PeculiarityInspector) -> None:
    versions = [
        Version("b", (os_name_matches("Linux"),)),
        Version("a", (os_name_matches("Windows"),)),
        Version("c"),
    ]

    assert [version.name for version in inspector.matching(versions)] == ["b", "c"]


def test_find_reports_ambiguity_and_keeps_first(inspector: PeculiarityInspector) -> None:
    first = Version("first", (os_name_matches("Linux"),))
    second = Version("second", (os_arch_matches("x86_64"),))

    finding = inspector.find([first, second])

    assert finding.value is first
    assert finding.ambiguous
    assert finding.note is not None
    assert "first" in finding.note and "second" in finding.note


def test_find_without_match_is_empty(inspector: PeculiarityInspector) -> None:
    finding = inspector.find([Version("other", (os_name_matches("Windows"),))])

    assert finding.value is None
    assert not finding.ambiguous
    assert finding.note is None


def test_match_requires_exactly_one(inspector: PeculiarityInspector) -> None:
    linux = Version("linux", (os_name_matches("Linux"),))
    also_linux = Version("also-linux", (os_name_matches("Linux"),))
    windows = Version("windows", (os_name_matches("Windows"),))

    assert inspector.match([windows, linux]) is linux

    with pytest.raises(ResolutionError, match="no match") as none_found:
        inspector.match([windows])
    assert none_found.value.candidates == (windows,)

    with pytest.raises(ResolutionError, match="more than one match") as too_many:
        inspector.match([linux, also_linux, windows])
    assert too_many.value.candidates == (linux, also_linux, windows)
    assert too_many.value.matched == (linux, also_linux)


def test_module_level_helpers_delegate(matchers: MatcherLookup) -> None:
    facts = fake_facts(LINUX_X86_64)
    linux = Version("linux", (os_name_matches("Linux"),))

    assert matching(facts, matchers, [linux]) == [linux]
    assert find(facts, matchers, [linux]).value is linux
    assert match(facts, matchers, [linux]) is linux
