# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Extractor reading text files and mapping their content to structured facts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from .model import MappedTextFile

LOGGER = logging.getLogger(__name__)

ValueT = TypeVar("ValueT")


def read_text(path: Path, encoding: str) -> str | None:
    """Return the content of ``path`` or ``None`` when it cannot be read.

    Args:
        path: File to read.
        encoding: Text encoding used to decode the content.

    Returns:
        str | None: Decoded file content, ``None`` when missing or unreadable.
    """

    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError:
        LOGGER.debug("fact file %s does not exist", path)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("fact file %s is unreadable: %s", path, exc)
    return None


@dataclass(frozen=True, slots=True)
class MappedTextFileExtractor:
    """Read a :class:`MappedTextFile` and hand its content to the converter.

    ``remap`` redirects declared paths to other locations, which lets callers
    point the catalog at a chroot or a captured copy of ``/etc``.
    """

    remap: Mapping[str, str] = field(default_factory=dict)

    def resolve(self, attribute: MappedTextFile[ValueT]) -> Path:
        """Return the location actually read for ``attribute``."""

        return Path(self.remap.get(attribute.path, attribute.path))

    def __call__(self, attribute: MappedTextFile[ValueT]) -> ValueT | None:
        content = read_text(self.resolve(attribute), attribute.encoding)
        if content is None:
            return None
        return attribute.converter(content)

    def __str__(self) -> str:
        return type(self).__name__


__all__ = ["MappedTextFileExtractor", "read_text"]
