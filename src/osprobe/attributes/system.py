# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read system properties from the live host or from a supplied mapping."""

from __future__ import annotations

import platform
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .model import SystemProperty

OS_NAME: Final[str] = "os.name"
OS_ARCH: Final[str] = "os.arch"
OS_VERSION: Final[str] = "os.version"

SYSTEM_NAME_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Darwin": "Mac OS X",
        "SunOS": "SunOS",
    },
)


def _non_empty(value: str) -> str | None:
    stripped = value.strip()
    return stripped or None


def _os_name() -> str | None:
    system = platform.system()
    return _non_empty(SYSTEM_NAME_LABELS.get(system, system))


def _os_arch() -> str | None:
    return _non_empty(platform.machine().lower())


def _os_version() -> str | None:
    return _non_empty(platform.release())


HOST_PROPERTIES: Final[Mapping[str, Callable[[], str | None]]] = MappingProxyType(
    {
        OS_NAME: _os_name,
        OS_ARCH: _os_arch,
        OS_VERSION: _os_version,
    },
)


def host_property(name: str) -> str | None:
    """Return the live host value of the system property ``name``.

    Args:
        name: Property name such as ``os.name``, ``os.arch`` or ``os.version``.

    Returns:
        str | None: Current value, or ``None`` for unknown or empty properties.
    """

    reader = HOST_PROPERTIES.get(name)
    return reader() if reader is not None else None


@dataclass(frozen=True, slots=True)
class SystemPropertyExtractor:
    """Extract :class:`SystemProperty` facts, layering overrides over the host."""

    overrides: Mapping[str, str] = field(default_factory=dict)
    include_host: bool = True

    def __call__(self, attribute: SystemProperty) -> str | None:
        if attribute.name in self.overrides:
            return self.overrides[attribute.name]
        if not self.include_host:
            return None
        return host_property(attribute.name)

    def __str__(self) -> str:
        return type(self).__name__


def properties_from(values: Mapping[str, str]) -> SystemPropertyExtractor:
    """Return an extractor answering only from ``values`` (no host access)."""

    return SystemPropertyExtractor(overrides=dict(values), include_host=False)


__all__ = [
    "HOST_PROPERTIES",
    "OS_ARCH",
    "OS_NAME",
    "OS_VERSION",
    "SystemPropertyExtractor",
    "host_property",
    "properties_from",
]
