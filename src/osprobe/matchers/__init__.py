# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Match specifications and the matchers evaluating them."""

from __future__ import annotations

from .lookup import Matcher, MatcherLookup
from .model import (
    LsbReleaseFileEntry,
    Match,
    MatchPattern,
    OsReleaseFileEntry,
    lsb_release_entry,
    match_pattern,
    os_release_entry,
)

__all__ = [
    "LsbReleaseFileEntry",
    "Match",
    "MatchPattern",
    "Matcher",
    "MatcherLookup",
    "OsReleaseFileEntry",
    "lsb_release_entry",
    "match_pattern",
    "os_release_entry",
]
