# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for probe settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from osprobe.config import (
    ConfigError,
    ProbeSettings,
    discover_config,
    env_fragment,
    load_settings,
    merge_fragments,
)
from osprobe.release_files import LSB_RELEASE_PATH, OS_RELEASE_PATH


def test_defaults_without_sources(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={})

    assert settings == ProbeSettings()
    assert settings.override is None
    assert settings.file_remap() == {}


def test_env_fragment_maps_property_names() -> None:
    fragment = env_fragment(
        {
            "OSPROBE_OVERRIDE": "Linux|X86_64",
            "OSPROBE_PROPERTY_OS_ARCH": "arm64",
            "OSPROBE_PROPERTY_": "ignored",
            "PATH": "/usr/bin",
        }
    )

    assert fragment == {"override": "Linux|X86_64", "properties": {"os.arch": "arm64"}}


def test_osprobe_toml_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text(
        'os_release_path = "/captured/os-release"\n[properties]\n"os.name" = "Linux"\n',
        encoding="utf-8",
    )

    settings = load_settings(tmp_path, env={})

    assert settings.properties == {"os.name": "Linux"}
    assert settings.file_remap() == {OS_RELEASE_PATH: "/captured/os-release"}


def test_pyproject_section_is_used(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.osprobe]\nlsb_release_path = "lsb"\n',
        encoding="utf-8",
    )

    assert discover_config(tmp_path) == tmp_path / "pyproject.toml"
    assert load_settings(tmp_path, env={}).file_remap() == {LSB_RELEASE_PATH: "lsb"}


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert discover_config(tmp_path) is None


def test_osprobe_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text('override = "OS_X|X86_64"\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text('[tool.osprobe]\noverride = "Linux|X86_64"\n', encoding="utf-8")

    assert load_settings(tmp_path, env={}).override == "OS_X|X86_64"


def test_precedence_file_then_env_then_overrides(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text(
        'override = "Linux|X86_64"\n[properties]\n"os.name" = "Linux"\n"os.arch" = "x86"\n',
        encoding="utf-8",
    )
    env = {"OSPROBE_OVERRIDE": "OS_X|X86_64", "OSPROBE_PROPERTY_OS_ARCH": "arm64"}

    settings = load_settings(tmp_path, env=env, overrides={"properties": {"os.version": "6.1"}})

    assert settings.override == "OS_X|X86_64"
    assert settings.properties == {"os.name": "Linux", "os.arch": "arm64", "os.version": "6.1"}


def test_blank_override_is_unset() -> None:
    assert ProbeSettings(override="   ").override is None


def test_unknown_key_is_a_config_error(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text('overide = "Linux|X86_64"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid osprobe configuration"):
        load_settings(tmp_path, env={})


def test_malformed_toml_is_a_config_error(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text("override = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid TOML"):
        load_settings(tmp_path, env={})


def test_explicit_missing_config_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_settings(config_path=tmp_path / "missing.toml", env={})


def test_merge_fragments_merges_properties_per_key() -> None:
    merged = merge_fragments({"properties": {"a": "1", "b": "2"}}, {"properties": {"b": "3"}, "override": "x"})

    assert merged == {"properties": {"a": "1", "b": "3"}, "override": "x"}
