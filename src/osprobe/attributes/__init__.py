# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Attribute handles and the extractors resolving them against the host."""

from __future__ import annotations

from .extractors import AttributeExtractor, AttributeExtractorLookup
from .files import MappedTextFileExtractor
from .model import Attribute, MappedTextFile, SystemProperty, mapped_text_file, system_property
from .system import OS_ARCH, OS_NAME, OS_VERSION, SystemPropertyExtractor, host_property, properties_from

__all__ = [
    "OS_ARCH",
    "OS_NAME",
    "OS_VERSION",
    "Attribute",
    "AttributeExtractor",
    "AttributeExtractorLookup",
    "MappedTextFile",
    "MappedTextFileExtractor",
    "SystemProperty",
    "SystemPropertyExtractor",
    "host_property",
    "mapped_text_file",
    "properties_from",
    "system_property",
]
