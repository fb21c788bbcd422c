# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Extractor strategies and the lookup chain selecting them per attribute kind."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from ..dispatch import KindLookup
from .files import MappedTextFileExtractor
from .model import Attribute, MappedTextFile, SystemProperty
from .system import SystemPropertyExtractor

ValueT = TypeVar("ValueT")


@runtime_checkable
class AttributeExtractor(Protocol):
    """Turn a concrete attribute into its observed value."""

    def __call__(self, attribute: Any) -> Any | None:
        """Return the observed value of ``attribute`` or ``None`` when absent."""

        raise NotImplementedError


class AttributeExtractorLookup(KindLookup[AttributeExtractor]):
    """Chain of extractors dispatched on the attribute's class."""

    role: ClassVar[str] = "extractor"

    __slots__ = ()

    def extract(self, attribute: Attribute[ValueT]) -> ValueT | None:
        """Return the observed value of ``attribute``.

        Args:
            attribute: Fact handle to resolve.

        Returns:
            ValueT | None: Extracted value, ``None`` when the fact is absent or no
            link claims the attribute kind.

        Raises:
            UnhandledKindError: If the chain's failing terminal is reached.
        """

        extractor = self.handler(attribute)
        if extractor is None:
            return None
        return extractor(attribute)

    @classmethod
    def system_default(
        cls,
        properties: Mapping[str, str] | None = None,
        files: Mapping[str, str] | None = None,
    ) -> AttributeExtractorLookup:
        """Return the host-backed chain for system properties and text files.

        Args:
            properties: Optional property values taking precedence over the host.
            files: Optional mapping redirecting declared file paths elsewhere.

        Returns:
            AttributeExtractorLookup: Chain terminated by the failing link.
        """

        return (
            cls.with_(SystemProperty, SystemPropertyExtractor(overrides=dict(properties or {})))
            .join(cls.with_(MappedTextFile, MappedTextFileExtractor(remap=dict(files or {}))))
            .join(cls.failing())
        )


__all__ = ["AttributeExtractor", "AttributeExtractorLookup"]
