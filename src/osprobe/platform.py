# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve the host :class:`Platform` from a catalog and the observed facts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Final

from .attributes.extractors import AttributeExtractorLookup
from .catalog.builtin import BUILTIN_CATALOG
from .catalog.model import Architecture, Distribution, OperatingSystem, Version, find_by_name, names_of
from .catalog.priority import sorted_by_priority
from .config import ProbeSettings
from .errors import OverrideParseError
from .inspector import PeculiarityInspector
from .matchers.lookup import MatcherLookup

OVERRIDE_SEPARATOR: Final[str] = "|"
OVERRIDE_FORMS: Final[str] = "OS|ARCH or OS|ARCH|DISTRIBUTION|VERSION"
UNDECIDED_VERSION: Final[str] = "?"
_SHORT_FORM: Final[int] = 2
_LONG_FORM: Final[int] = 4


@dataclass(frozen=True, slots=True)
class Platform:
    """Resolved operating system, architecture and optional distribution/version."""

    operating_system: OperatingSystem
    architecture: Architecture
    distribution: Distribution | None = None
    version: Version | None = None

    def __post_init__(self) -> None:
        if self.version is not None and self.distribution is None:
            raise ValueError("a platform version requires a distribution")

    def __str__(self) -> str:
        tokens = [self.operating_system.name, self.architecture.name]
        if self.distribution is not None and self.version is not None:
            tokens.extend((self.distribution.name, self.version.name))
        return OVERRIDE_SEPARATOR.join(tokens)

    def describe(self) -> str:
        """Return a display form that keeps a distribution whose version is unknown.

        Identical to ``str(self)`` except that a distribution without a version
        renders as ``OS|ARCH|DISTRIBUTION|?``; that form is not a valid override.
        """

        if self.distribution is not None and self.version is None:
            return OVERRIDE_SEPARATOR.join(
                (self.operating_system.name, self.architecture.name, self.distribution.name, UNDECIDED_VERSION)
            )
        return str(self)

    def as_dict(self) -> dict[str, str | None]:
        """Return the platform as plain identifiers, suitable for JSON output."""

        return {
            "operating_system": self.operating_system.name,
            "architecture": self.architecture.name,
            "distribution": self.distribution.name if self.distribution is not None else None,
            "version": self.version.name if self.version is not None else None,
        }


@dataclass(frozen=True, slots=True)
class Detection:
    """Detected platform together with the ambiguity notes raised on the way."""

    platform: Platform
    notes: tuple[str, ...] = ()


def _inspector(
    extractors: AttributeExtractorLookup | None,
    matchers: MatcherLookup | None,
) -> PeculiarityInspector:
    return PeculiarityInspector(
        extractors if extractors is not None else AttributeExtractorLookup.system_default(),
        matchers if matchers is not None else MatcherLookup.system_default(),
    )


def detect_with_notes(
    catalog: Sequence[OperatingSystem] = BUILTIN_CATALOG,
    extractors: AttributeExtractorLookup | None = None,
    matchers: MatcherLookup | None = None,
) -> Detection:
    """Detect the single most plausible platform and collect ambiguity notes.

    Operating system and architecture must resolve to exactly one entry each.
    An ambiguous distribution drops both distribution and version; an
    ambiguous version keeps the first eligible version in catalog order.

    Args:
        catalog: Operating system catalog to walk.
        extractors: Extractor chain; the host-backed default when omitted.
        matchers: Matcher chain; the built-in default when omitted.

    Returns:
        Detection: Resolved platform plus any ambiguity notes.

    Raises:
        ResolutionError: If the operating system or architecture is not unique.
        UnhandledKindError: If the catalog uses a kind the chains do not handle.
    """

    inspector = _inspector(extractors, matchers)
    operating_system = inspector.match(catalog)
    architecture = inspector.match(operating_system.architectures)

    notes: list[str] = []
    distribution: Distribution | None = None
    version: Version | None = None
    distributions = inspector.find(operating_system.distributions)
    if distributions.ambiguous:
        notes.append(f"distribution of {operating_system}: {distributions.note}; distribution left undecided")
    elif distributions.value is not None:
        distribution = distributions.value
        versions = inspector.find(distribution.versions)
        if versions.note is not None:
            notes.append(f"version of {distribution}: {versions.note}")
        version = versions.value

    return Detection(
        platform=Platform(operating_system, architecture, distribution, version),
        notes=tuple(notes),
    )


def detect(
    catalog: Sequence[OperatingSystem] = BUILTIN_CATALOG,
    extractors: AttributeExtractorLookup | None = None,
    matchers: MatcherLookup | None = None,
) -> Platform:
    """Return the detected platform; see :func:`detect_with_notes`."""

    return detect_with_notes(catalog, extractors, matchers).platform


def guess(
    catalog: Sequence[OperatingSystem] = BUILTIN_CATALOG,
    extractors: AttributeExtractorLookup | None = None,
    matchers: MatcherLookup | None = None,
) -> list[Platform]:
    """Return every plausible platform, highest version priority first.

    Operating system and architecture stay strict.  Every eligible
    distribution contributes one platform per eligible version, or a single
    version-less platform when none of its versions is eligible.  When no
    distribution is eligible the bare operating system/architecture platform
    is returned.

    Args:
        catalog: Operating system catalog to walk.
        extractors: Extractor chain; the host-backed default when omitted.
        matchers: Matcher chain; the built-in default when omitted.

    Returns:
        list[Platform]: Candidates sorted by descending priority, catalog order
        breaking ties.

    Raises:
        ResolutionError: If the operating system or architecture is not unique.
    """

    inspector = _inspector(extractors, matchers)
    operating_system = inspector.match(catalog)
    architecture = inspector.match(operating_system.architectures)

    platforms: list[Platform] = []
    for distribution in inspector.matching(operating_system.distributions):
        versions = inspector.matching(distribution.versions)
        if not versions:
            platforms.append(Platform(operating_system, architecture, distribution))
            continue
        platforms.extend(Platform(operating_system, architecture, distribution, version) for version in versions)
    if not platforms:
        platforms.append(Platform(operating_system, architecture))
    return sorted_by_priority(platforms, key=attrgetter("version"))


def parse_override(catalog: Sequence[OperatingSystem], override: str) -> Platform:
    """Return the platform named by ``override`` without inspecting the host.

    Args:
        catalog: Operating system catalog holding the declared identifiers.
        override: ``OS|ARCH`` or ``OS|ARCH|DISTRIBUTION|VERSION``.

    Returns:
        Platform: Platform assembled from the named catalog entries.

    Raises:
        OverrideParseError: If the token count is wrong or a token names no entry.
    """

    context = f"invalid platform override '{override}'"
    tokens = [token.strip() for token in override.split(OVERRIDE_SEPARATOR)]
    if len(tokens) not in (_SHORT_FORM, _LONG_FORM):
        raise OverrideParseError(f"{context}: expected {OVERRIDE_FORMS}, got {len(tokens)} token(s)")

    os_token, arch_token = tokens[0], tokens[1]
    operating_system = find_by_name(catalog, os_token)
    if operating_system is None:
        raise OverrideParseError(context, token=os_token, alternatives=names_of(catalog))
    architecture = find_by_name(operating_system.architectures, arch_token)
    if architecture is None:
        raise OverrideParseError(context, token=arch_token, alternatives=names_of(operating_system.architectures))
    if len(tokens) == _SHORT_FORM:
        return Platform(operating_system, architecture)

    dist_token, version_token = tokens[2], tokens[3]
    distribution = find_by_name(operating_system.distributions, dist_token)
    if distribution is None:
        raise OverrideParseError(context, token=dist_token, alternatives=names_of(operating_system.distributions))
    version = find_by_name(distribution.versions, version_token)
    if version is None:
        raise OverrideParseError(context, token=version_token, alternatives=names_of(distribution.versions))
    return Platform(operating_system, architecture, distribution, version)


def resolve(
    catalog: Sequence[OperatingSystem] = BUILTIN_CATALOG,
    settings: ProbeSettings | None = None,
) -> Detection:
    """Return the platform selected by ``settings``.

    A configured override wins and bypasses detection entirely; otherwise the
    host is inspected with the extractor chain the settings describe.

    Args:
        catalog: Operating system catalog to resolve against.
        settings: Probe settings; defaults apply when omitted.

    Returns:
        Detection: Resolved platform plus ambiguity notes (none for overrides).
    """

    settings = settings if settings is not None else ProbeSettings()
    if settings.override is not None:
        return Detection(platform=parse_override(catalog, settings.override))
    return detect_with_notes(catalog, settings.extractors())


__all__ = [
    "OVERRIDE_FORMS",
    "OVERRIDE_SEPARATOR",
    "UNDECIDED_VERSION",
    "Detection",
    "Platform",
    "detect",
    "detect_with_notes",
    "guess",
    "parse_override",
    "resolve",
]
