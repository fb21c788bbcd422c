# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the common architecture catalog."""

from __future__ import annotations

import pytest

from osprobe.catalog import ARM_32, ARM_64, COMMON_ARCHITECTURES, X86_32, X86_64, Architecture
from osprobe.errors import ResolutionError
from osprobe.inspector import match
from osprobe.matchers import MatcherLookup

from sample_catalog import fake_facts


def _detect_architecture(os_arch: str) -> Architecture:
    return match(fake_facts({"os.arch": os_arch}), MatcherLookup.system_default(), COMMON_ARCHITECTURES)


@pytest.mark.parametrize("os_arch", ["amd64", "ia32e", "x64", "x86_64"])
def test_detect_x86_64_if_os_arch_matches(os_arch: str) -> None:
    assert _detect_architecture(os_arch) is X86_64


@pytest.mark.parametrize("os_arch", ["aarch64", "arm64"])
def test_detect_arm_64_if_os_arch_matches(os_arch: str) -> None:
    assert _detect_architecture(os_arch) is ARM_64


@pytest.mark.parametrize("os_arch", ["x86", "i386", "i686"])
def test_detect_x86_32_if_os_arch_matches(os_arch: str) -> None:
    assert _detect_architecture(os_arch) is X86_32


def test_detect_arm_32() -> None:
    assert _detect_architecture("armv7l") is ARM_32


def test_unknown_architecture_is_a_resolution_error() -> None:
    with pytest.raises(ResolutionError, match="no match") as excinfo:
        _detect_architecture("sparc64")
    assert excinfo.value.candidates == COMMON_ARCHITECTURES
