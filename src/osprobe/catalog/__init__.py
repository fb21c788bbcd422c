# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog records, priority helpers and the built-in catalog."""

from __future__ import annotations

from .architectures import ARM_32, ARM_64, COMMON_ARCHITECTURES, PPC_64_LE, X86_32, X86_64
from .builtin import BUILTIN_CATALOG
from .model import (
    Architecture,
    Distribution,
    HasPeculiarities,
    OperatingSystem,
    Version,
    find_by_name,
    names_of,
    operating_systems,
)
from .priority import DEFAULT_PRIORITY, priority_of, sorted_by_priority

__all__ = [
    "ARM_32",
    "ARM_64",
    "BUILTIN_CATALOG",
    "COMMON_ARCHITECTURES",
    "DEFAULT_PRIORITY",
    "PPC_64_LE",
    "X86_32",
    "X86_64",
    "Architecture",
    "Distribution",
    "HasPeculiarities",
    "OperatingSystem",
    "Version",
    "find_by_name",
    "names_of",
    "operating_systems",
    "priority_of",
    "sorted_by_priority",
]
