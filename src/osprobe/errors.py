# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while resolving the host platform."""

from __future__ import annotations

from collections.abc import Sequence


class OsProbeError(RuntimeError):
    """Base class for every error raised by :mod:`osprobe`."""


class ConfigurationError(OsProbeError):
    """Raised when catalog declarations and registered lookups disagree."""


class UnhandledKindError(ConfigurationError):
    """Raised when no lookup link claims an attribute or match kind."""

    def __init__(self, role: str, item: object) -> None:
        """Create the error for ``item`` reached the failing end of a chain.

        Args:
            role: Chain flavour, ``"extractor"`` or ``"matcher"``.
            item: Attribute or match specification nobody claimed.
        """

        self.role = role
        self.item = item
        self.kind_name = type(item).__name__
        super().__init__(f"no {role} registered for {self.kind_name}: {item!r}")


class ResolutionError(OsProbeError):
    """Raised when a strict resolution step finds zero or several candidates."""

    def __init__(
        self,
        message: str,
        *,
        candidates: Sequence[object],
        matched: Sequence[object] = (),
    ) -> None:
        """Capture the candidate lists alongside the message.

        Args:
            message: Human-readable summary of the failure.
            candidates: Every candidate considered by the step.
            matched: Candidates whose peculiarities evaluated to ``True``.
        """

        super().__init__(message)
        self.candidates = tuple(candidates)
        self.matched = tuple(matched)


class OverrideParseError(OsProbeError):
    """Raised when an override string cannot be mapped onto the catalog."""

    def __init__(self, message: str, *, token: str | None = None, alternatives: Sequence[str] = ()) -> None:
        self.token = token
        self.alternatives = tuple(alternatives)
        if token is not None:
            legal = ", ".join(self.alternatives) if self.alternatives else "<none>"
            message = f"{message}: could not resolve '{token}' (expected one of: {legal})"
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "OsProbeError",
    "OverrideParseError",
    "ResolutionError",
    "UnhandledKindError",
]
