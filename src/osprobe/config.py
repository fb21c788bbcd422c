# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Settings controlling how the host platform is probed.

Sources are layered lowest precedence first: built-in defaults, a TOML
document (``osprobe.toml`` or the ``[tool.osprobe]`` table of
``pyproject.toml``), then ``OSPROBE_*`` environment variables.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .attributes.extractors import AttributeExtractorLookup
from .errors import OsProbeError
from .release_files import LSB_RELEASE_PATH, OS_RELEASE_PATH

CONFIG_FILENAME: Final[str] = "osprobe.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "osprobe"

ENV_PREFIX: Final[str] = "OSPROBE_"
OVERRIDE_ENV: Final[str] = f"{ENV_PREFIX}OVERRIDE"
PROPERTY_ENV_PREFIX: Final[str] = f"{ENV_PREFIX}PROPERTY_"


class ConfigError(OsProbeError):
    """Raised when configuration input is invalid."""


class ProbeSettings(BaseModel):
    """Validated probe configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    override: str | None = None
    properties: dict[str, str] = Field(default_factory=dict)
    os_release_path: str | None = None
    lsb_release_path: str | None = None

    @field_validator("override")
    @classmethod
    def _blank_override_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    def file_remap(self) -> dict[str, str]:
        """Return declared-path → actual-path redirections for release files."""

        remap: dict[str, str] = {}
        if self.os_release_path:
            remap[OS_RELEASE_PATH] = self.os_release_path
        if self.lsb_release_path:
            remap[LSB_RELEASE_PATH] = self.lsb_release_path
        return remap

    def extractors(self) -> AttributeExtractorLookup:
        """Return the host-backed extractor chain honouring these settings."""

        return AttributeExtractorLookup.system_default(properties=self.properties, files=self.file_remap())


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"unable to read configuration at {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _section_of(path: Path, document: Mapping[str, Any]) -> Mapping[str, Any]:
    if path.name != PYPROJECT_FILENAME:
        return document
    tool = document.get(PYPROJECT_TOOL_KEY, {})
    section = tool.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool, Mapping) else {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def discover_config(root: Path) -> Path | None:
    """Return the configuration file governing ``root``, if any.

    ``osprobe.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it carries a ``[tool.osprobe]`` table.
    """

    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file() and _section_of(pyproject, _read_toml(pyproject)):
        return pyproject
    return None


def load_file_fragment(path: Path) -> dict[str, Any]:
    """Return the settings fragment stored in ``path``.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """

    if not path.is_file():
        raise ConfigError(f"configuration file {path} does not exist")
    return dict(_section_of(path, _read_toml(path)))


def env_fragment(env: Mapping[str, str]) -> dict[str, Any]:
    """Return the settings fragment encoded in ``OSPROBE_*`` variables.

    ``OSPROBE_PROPERTY_OS_ARCH=arm64`` sets the ``os.arch`` property; underscores
    in the suffix map to dots and the name is lower-cased.
    """

    fragment: dict[str, Any] = {}
    if OVERRIDE_ENV in env:
        fragment["override"] = env[OVERRIDE_ENV]
    properties = {
        key[len(PROPERTY_ENV_PREFIX) :].lower().replace("_", "."): value
        for key, value in env.items()
        if key.startswith(PROPERTY_ENV_PREFIX) and len(key) > len(PROPERTY_ENV_PREFIX)
    }
    if properties:
        fragment["properties"] = properties
    return fragment


def merge_fragments(*fragments: Mapping[str, Any]) -> dict[str, Any]:
    """Merge settings fragments, later ones winning; ``properties`` merge per key."""

    merged: dict[str, Any] = {}
    for fragment in fragments:
        for key, value in fragment.items():
            if key == "properties" and isinstance(value, Mapping):
                existing = merged.get("properties", {})
                merged["properties"] = {**existing, **value}
            else:
                merged[key] = value
    return merged


def load_settings(
    root: Path | None = None,
    *,
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ProbeSettings:
    """Load :class:`ProbeSettings` from file, environment and explicit overrides.

    Args:
        root: Directory searched for a configuration file; defaults to the cwd.
        config_path: Explicit configuration file, bypassing discovery.
        env: Environment mapping; defaults to :data:`os.environ`.
        overrides: Highest-precedence fragment (for example CLI options).

    Returns:
        ProbeSettings: Validated settings.

    Raises:
        ConfigError: If a source is malformed or validation fails.
    """

    path = config_path if config_path is not None else discover_config(root or Path.cwd())
    file_fragment = load_file_fragment(path) if path is not None else {}
    merged = merge_fragments(file_fragment, env_fragment(os.environ if env is None else env), overrides or {})
    try:
        return ProbeSettings.model_validate(merged)
    except ValidationError as exc:
        source = f" ({path})" if path is not None else ""
        raise ConfigError(f"invalid osprobe configuration{source}: {exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "OVERRIDE_ENV",
    "PROPERTY_ENV_PREFIX",
    "ConfigError",
    "ProbeSettings",
    "discover_config",
    "env_fragment",
    "load_file_fragment",
    "load_settings",
    "merge_fragments",
]
