# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

from osprobe.matchers import MatcherLookup


@pytest.fixture
def matchers() -> MatcherLookup:
    """Return the built-in matcher chain."""
    return MatcherLookup.system_default()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ``OSPROBE_*`` variables leaking in from the calling shell."""
    for key in list(os.environ):
        if key.startswith("OSPROBE_"):
            monkeypatch.delenv(key, raising=False)
