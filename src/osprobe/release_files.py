# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Key/value facts parsed from ``os-release`` and ``lsb-release`` style files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .attributes.model import MappedTextFile, mapped_text_file

OS_RELEASE_PATH: Final[str] = "/etc/os-release"
LSB_RELEASE_PATH: Final[str] = "/etc/lsb-release"

_QUOTES: Final[tuple[str, ...]] = ('"', "'")


def _freeze(values: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True, slots=True)
class OsReleaseFile:
    """Content of an os-release style file (``NAME``, ``VERSION_ID``, ...)."""

    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or ``None``."""

        return self.attributes.get(key)


@dataclass(frozen=True, slots=True)
class LsbReleaseFile:
    """Content of an lsb-release style file (``DISTRIB_ID``, ``DISTRIB_RELEASE``, ...)."""

    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or ``None``."""

        return self.attributes.get(key)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def parse_key_values(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, ignoring blanks, comments and malformed lines.

    Args:
        lines: Raw lines of a release file.

    Returns:
        dict[str, str]: Parsed entries; later keys override earlier ones.
    """

    entries: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, separator, value = line.partition("=")
        key = key.strip()
        if not separator or not key:
            continue
        entries[key] = _unquote(value.strip())
    return entries


def parse_os_release(content: str) -> OsReleaseFile:
    """Return the :class:`OsReleaseFile` described by ``content``."""

    return OsReleaseFile(parse_key_values(content.splitlines()))


def parse_lsb_release(content: str) -> LsbReleaseFile:
    """Return the :class:`LsbReleaseFile` described by ``content``."""

    return LsbReleaseFile(parse_key_values(content.splitlines()))


def release_file(path: str) -> MappedTextFile[OsReleaseFile]:
    """Return an attribute reading an os-release formatted file at ``path``."""

    return mapped_text_file(path, parse_os_release)


def os_release_file(path: str = OS_RELEASE_PATH) -> MappedTextFile[OsReleaseFile]:
    """Return the attribute for the host's ``/etc/os-release`` file."""

    return release_file(path)


def lsb_release_file(path: str = LSB_RELEASE_PATH) -> MappedTextFile[LsbReleaseFile]:
    """Return the attribute for the host's ``/etc/lsb-release`` file."""

    return mapped_text_file(path, parse_lsb_release)


__all__ = [
    "LSB_RELEASE_PATH",
    "OS_RELEASE_PATH",
    "LsbReleaseFile",
    "OsReleaseFile",
    "lsb_release_file",
    "os_release_file",
    "parse_key_values",
    "parse_lsb_release",
    "parse_os_release",
    "release_file",
]
