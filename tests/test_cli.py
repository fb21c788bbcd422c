# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the osprobe command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from osprobe.cli import app

UBUNTU_OS_RELEASE = 'NAME="Ubuntu"\nVERSION_ID="22.04"\n'
UBUNTU_25_04_OS_RELEASE = 'NAME="Ubuntu"\nVERSION_ID="25.04"\n'


def _host_args(
    tmp_path: Path,
    *,
    os_version: str = "5.15.0-105-generic",
    os_release_text: str = UBUNTU_OS_RELEASE,
) -> list[str]:
    os_release = tmp_path / "os-release"
    os_release.write_text(os_release_text, encoding="utf-8")
    return [
        "--root",
        str(tmp_path),
        "--no-emoji",
        "--property",
        "os.name=Linux",
        "--property",
        "os.arch=x86_64",
        "--property",
        f"os.version={os_version}",
        "--os-release",
        str(os_release),
        "--lsb-release",
        str(tmp_path / "lsb-release"),
    ]


def test_detect_prints_override_form(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["detect", *_host_args(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "Linux|X86_64|Ubuntu|Ubuntu_22_04" in result.output


def test_detect_emits_json(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["detect", "--json", *_host_args(tmp_path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["platforms"] == [
        {
            "operating_system": "Linux",
            "architecture": "X86_64",
            "distribution": "Ubuntu",
            "version": "Ubuntu_22_04",
        }
    ]
    assert payload["notes"] == []


def test_detect_honours_override_env(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["detect", *_host_args(tmp_path)],
        env={"OSPROBE_OVERRIDE": "FreeBSD|ARM_64"},
    )

    assert result.exit_code == 0, result.output
    assert "FreeBSD|ARM_64" in result.output


def test_guess_lists_candidates_by_priority(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["guess", *_host_args(tmp_path, os_version="4.14.256-197.484.amzn2.x86_64")])

    assert result.exit_code == 0, result.output
    lines = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert lines == ["Linux|X86_64|Ubuntu|Ubuntu_22_04", "Linux|X86_64|Amazon|AmazonLinux2"]


def test_parse_accepts_valid_override() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--no-emoji", "Linux|ARM_64|Debian|Debian_12"])

    assert result.exit_code == 0, result.output
    assert "Linux|ARM_64|Debian|Debian_12" in result.output


def test_parse_reports_unknown_token() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--no-emoji", "Linux|X86_64|Foo|Ubuntu_22_04"])

    assert result.exit_code == 1
    assert "could not resolve 'Foo'" in result.output
    assert "Ubuntu" in result.output


def test_bad_property_option_exits_with_usage_code(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["detect", "--root", str(tmp_path), "--no-emoji", "--property", "broken"])

    assert result.exit_code == 2
    assert "expected NAME=VALUE" in result.output


def test_invalid_configuration_exits_with_config_code(tmp_path: Path) -> None:
    (tmp_path / "osprobe.toml").write_text('unknown = "value"\n', encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["detect", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 2
    assert "invalid osprobe configuration" in result.output


def test_catalog_lists_identifiers() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["catalog", "--no-emoji"])

    assert result.exit_code == 0, result.output
    assert "Ubuntu_22_04" in result.output
    assert "override forms: OS|ARCH or OS|ARCH|DISTRIBUTION|VERSION" in result.output
    assert "AmazonLinux2 (priority -1)" in result.output
    assert "X86_64" in result.output


def test_detect_shows_distribution_without_matching_version(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["detect", *_host_args(tmp_path, os_release_text=UBUNTU_25_04_OS_RELEASE)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Linux|X86_64|Ubuntu|?"


def test_guess_shows_version_less_distribution(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["guess", *_host_args(tmp_path, os_release_text=UBUNTU_25_04_OS_RELEASE)])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Linux|X86_64|Ubuntu|?"


def test_detect_json_keeps_distribution_without_version(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["detect", "--json", *_host_args(tmp_path, os_release_text=UBUNTU_25_04_OS_RELEASE)])

    assert result.exit_code == 0, result.output
    platform = json.loads(result.output)["platforms"][0]
    assert platform["distribution"] == "Ubuntu"
    assert platform["version"] is None
