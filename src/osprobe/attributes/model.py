# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed handles naming the host facts a peculiarity can test."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final, Generic, TypeVar

ValueT = TypeVar("ValueT")

DEFAULT_ENCODING: Final[str] = "utf-8"


@dataclass(frozen=True, slots=True)
class Attribute(Generic[ValueT]):
    """Identify one queryable fact resolving to a ``ValueT``.

    Equality covers the concrete attribute class and ``name`` only, so two
    handles declared independently for the same fact compare equal.
    """

    name: str

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.name})"


@dataclass(frozen=True, slots=True)
class SystemProperty(Attribute[str]):
    """Named property of the running interpreter's host (``os.name`` etc.)."""


@dataclass(frozen=True, slots=True)
class MappedTextFile(Attribute[ValueT]):
    """Text file at ``name`` whose content ``converter`` turns into a fact."""

    converter: Callable[[str], ValueT] = field(compare=False, repr=False)
    encoding: str = field(default=DEFAULT_ENCODING, compare=False)

    @property
    def path(self) -> str:
        """Return the filesystem location read for this attribute."""

        return self.name


def system_property(name: str) -> SystemProperty:
    """Return the attribute handle for the system property ``name``."""

    return SystemProperty(name)


def mapped_text_file(
    path: str,
    converter: Callable[[str], ValueT],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> MappedTextFile[ValueT]:
    """Return an attribute reading ``path`` and converting it with ``converter``.

    Args:
        path: Absolute location of the text file.
        converter: Callable turning the raw file content into a structured fact.
        encoding: Text encoding used to decode the file.

    Returns:
        MappedTextFile[ValueT]: Attribute handle for the file fact.
    """

    return MappedTextFile(path, converter, encoding)


__all__ = [
    "DEFAULT_ENCODING",
    "Attribute",
    "MappedTextFile",
    "SystemProperty",
    "mapped_text_file",
    "system_property",
]
