# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Predicate trees over host facts gating the eligibility of catalog entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from .attributes.model import Attribute, system_property
from .attributes.system import OS_ARCH, OS_NAME, OS_VERSION
from .matchers.model import Match, lsb_release_entry, match_pattern, os_release_entry
from .release_files import lsb_release_file, os_release_file

ValueT = TypeVar("ValueT")


@dataclass(frozen=True, slots=True)
class Distinct(Generic[ValueT]):
    """Single fact test: ``attribute`` must satisfy ``match``."""

    attribute: Attribute[ValueT]
    match: Match[ValueT]

    def __str__(self) -> str:
        return f"{self.attribute} ~ {self.match}"


@dataclass(frozen=True, slots=True)
class OneOf:
    """Logical OR over ``children``; never holds when empty."""

    children: tuple[Peculiarity, ...]

    def __str__(self) -> str:
        return "OneOf(" + ", ".join(str(child) for child in self.children) + ")"


@dataclass(frozen=True, slots=True)
class AllOf:
    """Logical AND over ``children``; always holds when empty."""

    children: tuple[Peculiarity, ...]

    def __str__(self) -> str:
        return "AllOf(" + ", ".join(str(child) for child in self.children) + ")"


Peculiarity: TypeAlias = Distinct[Any] | OneOf | AllOf
Peculiarities: TypeAlias = tuple[Peculiarity, ...]


def distinct(attribute: Attribute[ValueT], match: Match[ValueT]) -> Distinct[ValueT]:
    """Return the peculiarity testing ``attribute`` against ``match``."""

    return Distinct(attribute, match)


def one_of(*children: Peculiarity) -> OneOf:
    """Return a disjunction of ``children``."""

    return OneOf(tuple(children))


def all_of(*children: Peculiarity) -> AllOf:
    """Return a conjunction of ``children``."""

    return AllOf(tuple(children))


def system_property_matches(name: str, pattern: str) -> Distinct[str]:
    """Return a test of the system property ``name`` against ``pattern``."""

    return Distinct(system_property(name), match_pattern(pattern))


def os_name_matches(pattern: str) -> Distinct[str]:
    """Return a test of ``os.name`` against ``pattern``."""

    return system_property_matches(OS_NAME, pattern)


def os_arch_matches(pattern: str) -> Distinct[str]:
    """Return a test of ``os.arch`` against ``pattern``."""

    return system_property_matches(OS_ARCH, pattern)


def os_version_matches(pattern: str) -> Distinct[str]:
    """Return a test of ``os.version`` against ``pattern``."""

    return system_property_matches(OS_VERSION, pattern)


def os_release_name_matches(pattern: str, *, path: str | None = None) -> Distinct[Any]:
    """Return a test of the os-release ``NAME`` entry."""

    attribute = os_release_file() if path is None else os_release_file(path)
    return Distinct(attribute, os_release_entry("NAME", pattern))


def os_release_version_matches(pattern: str, *, path: str | None = None) -> Distinct[Any]:
    """Return a test of the os-release ``VERSION_ID`` entry."""

    attribute = os_release_file() if path is None else os_release_file(path)
    return Distinct(attribute, os_release_entry("VERSION_ID", pattern))


def lsb_release_id_matches(pattern: str) -> Distinct[Any]:
    """Return a test of the lsb-release ``DISTRIB_ID`` entry."""

    return Distinct(lsb_release_file(), lsb_release_entry("DISTRIB_ID", pattern))


def lsb_release_version_matches(pattern: str) -> Distinct[Any]:
    """Return a test of the lsb-release ``DISTRIB_RELEASE`` entry."""

    return Distinct(lsb_release_file(), lsb_release_entry("DISTRIB_RELEASE", pattern))


__all__ = [
    "AllOf",
    "Distinct",
    "OneOf",
    "Peculiarities",
    "Peculiarity",
    "all_of",
    "distinct",
    "lsb_release_id_matches",
    "lsb_release_version_matches",
    "one_of",
    "os_arch_matches",
    "os_name_matches",
    "os_release_name_matches",
    "os_release_version_matches",
    "os_version_matches",
    "system_property_matches",
]
