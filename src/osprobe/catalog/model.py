# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable catalog records describing operating systems and their variants.

Catalogs are explicit, ordered registries: every level is a tuple of frozen
records built once at import time.  Records compare by identity because each
one is a declared constant; two records sharing a name at the same level are
rejected on construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar, runtime_checkable

from ..errors import ConfigurationError
from ..peculiarity import Peculiarities

NamedT = TypeVar("NamedT", bound="Named")


@runtime_checkable
class Named(Protocol):
    """Catalog entry addressable by its declared identifier."""

    @property
    def name(self) -> str:
        """Return the declared identifier."""

        raise NotImplementedError


@runtime_checkable
class HasPeculiarities(Protocol):
    """Catalog entry whose eligibility is gated by peculiarities."""

    @property
    def peculiarities(self) -> Peculiarities:
        """Return the peculiarities that must all hold for the entry to apply."""

        raise NotImplementedError


def _require_unique(entries: Iterable[Named], *, context: str) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            raise ConfigurationError(f"{context}: duplicate identifier '{entry.name}'")
        seen.add(entry.name)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Release of a distribution; ``priority`` ranks simultaneous matches, higher first."""

    name: str
    peculiarities: Peculiarities = ()
    priority: int = 0

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Distribution:
    """Distribution of an operating system owning its version catalog."""

    name: str
    peculiarities: Peculiarities = ()
    versions: tuple[Version, ...] = ()

    def __post_init__(self) -> None:
        _require_unique(self.versions, context=f"distribution {self.name} versions")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Architecture:
    """CPU architecture an operating system can run on."""

    name: str
    peculiarities: Peculiarities = ()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class OperatingSystem:
    """Operating system owning its architecture and distribution catalogs."""

    name: str
    peculiarities: Peculiarities = ()
    architectures: tuple[Architecture, ...] = ()
    distributions: tuple[Distribution, ...] = ()

    def __post_init__(self) -> None:
        _require_unique(self.architectures, context=f"operating system {self.name} architectures")
        _require_unique(self.distributions, context=f"operating system {self.name} distributions")

    def __str__(self) -> str:
        return self.name


def find_by_name(entries: Sequence[NamedT], name: str) -> NamedT | None:
    """Return the entry declared as ``name`` or ``None``."""

    for entry in entries:
        if entry.name == name:
            return entry
    return None


def names_of(entries: Iterable[Named]) -> tuple[str, ...]:
    """Return the declared identifiers of ``entries`` in catalog order."""

    return tuple(entry.name for entry in entries)


def operating_systems(*entries: OperatingSystem) -> tuple[OperatingSystem, ...]:
    """Return ``entries`` as an operating system catalog.

    Raises:
        ConfigurationError: If two operating systems share an identifier.
    """

    _require_unique(entries, context="operating systems")
    return tuple(entries)


__all__ = [
    "Architecture",
    "Distribution",
    "HasPeculiarities",
    "Named",
    "OperatingSystem",
    "Version",
    "find_by_name",
    "names_of",
    "operating_systems",
]
