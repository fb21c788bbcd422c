# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Architectures shared by every operating system of the built-in catalog."""

from __future__ import annotations

from typing import Final

from ..peculiarity import os_arch_matches
from .model import Architecture

X86_32: Final[Architecture] = Architecture("X86_32", (os_arch_matches("x86|i386|i486|i586|i686"),))
X86_64: Final[Architecture] = Architecture("X86_64", (os_arch_matches("amd64|ia32e|em64t|x64|x86_64"),))
ARM_32: Final[Architecture] = Architecture("ARM_32", (os_arch_matches("arm|armhf|armv6l|armv7|armv7l"),))
ARM_64: Final[Architecture] = Architecture("ARM_64", (os_arch_matches("aarch64|arm64"),))
PPC_64_LE: Final[Architecture] = Architecture("PPC_64_LE", (os_arch_matches("ppc64le"),))

COMMON_ARCHITECTURES: Final[tuple[Architecture, ...]] = (X86_32, X86_64, ARM_32, ARM_64, PPC_64_LE)

__all__ = ["ARM_32", "ARM_64", "COMMON_ARCHITECTURES", "PPC_64_LE", "X86_32", "X86_64"]
