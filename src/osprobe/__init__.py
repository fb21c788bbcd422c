# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Identify the host platform by evaluating declarative catalog rules."""

from __future__ import annotations

from importlib import metadata

from .attributes import AttributeExtractorLookup
from .errors import ConfigurationError, OsProbeError, OverrideParseError, ResolutionError, UnhandledKindError
from .inspector import Finding, PeculiarityInspector
from .matchers import MatcherLookup
from .platform import Detection, Platform, detect, detect_with_notes, guess, parse_override, resolve

__all__ = [
    "AttributeExtractorLookup",
    "ConfigurationError",
    "Detection",
    "Finding",
    "MatcherLookup",
    "OsProbeError",
    "OverrideParseError",
    "PeculiarityInspector",
    "Platform",
    "ResolutionError",
    "UnhandledKindError",
    "__version__",
    "detect",
    "detect_with_notes",
    "guess",
    "parse_override",
    "resolve",
]

try:
    __version__ = metadata.version("osprobe")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
