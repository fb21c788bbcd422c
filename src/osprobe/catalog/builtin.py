# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Default catalog of operating systems, distributions and versions."""

from __future__ import annotations

from typing import Final

from ..peculiarity import (
    OneOf,
    Peculiarities,
    lsb_release_id_matches,
    lsb_release_version_matches,
    one_of,
    os_name_matches,
    os_release_name_matches,
    os_release_version_matches,
    os_version_matches,
)
from .architectures import COMMON_ARCHITECTURES
from .model import Distribution, OperatingSystem, Version, operating_systems

WEAK_PRIORITY: Final[int] = -1


def _release_version(version_pattern: str) -> OneOf:
    return one_of(os_release_version_matches(version_pattern), lsb_release_version_matches(version_pattern))


def _version(name: str, version_pattern: str) -> Version:
    return Version(name, (_release_version(version_pattern),))


def _kernel_version(name: str, kernel_pattern: str) -> Version:
    return Version(name, (os_version_matches(kernel_pattern),), priority=WEAK_PRIORITY)


def _named(name_pattern: str, lsb_id_pattern: str | None = None) -> Peculiarities:
    if lsb_id_pattern is None:
        return (os_release_name_matches(name_pattern),)
    return (one_of(os_release_name_matches(name_pattern), lsb_release_id_matches(lsb_id_pattern)),)


UBUNTU: Final[Distribution] = Distribution(
    "Ubuntu",
    _named("Ubuntu", "Ubuntu"),
    (
        _version("Ubuntu_18_04", "18.04"),
        _version("Ubuntu_18_10", "18.10"),
        _version("Ubuntu_20_04", "20.04"),
        _version("Ubuntu_22_04", "22.04"),
        _version("Ubuntu_24_04", "24.04"),
    ),
)

DEBIAN: Final[Distribution] = Distribution(
    "Debian",
    _named("Debian GNU/Linux", "Debian"),
    (
        _version("Debian_10", "10"),
        _version("Debian_11", "11"),
        _version("Debian_12", "12"),
    ),
)

CENTOS: Final[Distribution] = Distribution(
    "CentOS",
    _named("CentOS( Linux| Stream)?"),
    (
        _version("CentOS_7", r"7(\..*)?"),
        _version("CentOS_8", r"8(\..*)?"),
        _version("CentOS_9", r"9(\..*)?"),
    ),
)

FEDORA: Final[Distribution] = Distribution(
    "Fedora",
    _named("Fedora( Linux)?"),
    (
        _version("Fedora_39", "39"),
        _version("Fedora_40", "40"),
        _version("Fedora_41", "41"),
    ),
)

AMAZON: Final[Distribution] = Distribution(
    "Amazon",
    (one_of(os_version_matches(".*amzn.*"), os_release_name_matches("Amazon Linux")),),
    (
        _kernel_version("AmazonLinux2", r".*\.amzn2\..*"),
        _kernel_version("AmazonLinux2023", r".*\.amzn2023\..*"),
    ),
)

MANJARO: Final[Distribution] = Distribution("Manjaro", (lsb_release_id_matches("ManjaroLinux"),))

LINUX: Final[OperatingSystem] = OperatingSystem(
    "Linux",
    (os_name_matches("Linux"),),
    COMMON_ARCHITECTURES,
    (UBUNTU, DEBIAN, CENTOS, FEDORA, AMAZON, MANJARO),
)
OS_X: Final[OperatingSystem] = OperatingSystem("OS_X", (os_name_matches("Mac OS X|Darwin"),), COMMON_ARCHITECTURES)
WINDOWS: Final[OperatingSystem] = OperatingSystem("Windows", (os_name_matches("Windows.*"),), COMMON_ARCHITECTURES)
FREEBSD: Final[OperatingSystem] = OperatingSystem("FreeBSD", (os_name_matches("FreeBSD"),), COMMON_ARCHITECTURES)
SOLARIS: Final[OperatingSystem] = OperatingSystem("Solaris", (os_name_matches("SunOS|Solaris"),), COMMON_ARCHITECTURES)

BUILTIN_CATALOG: Final[tuple[OperatingSystem, ...]] = operating_systems(LINUX, OS_X, WINDOWS, FREEBSD, SOLARIS)

__all__ = [
    "AMAZON",
    "BUILTIN_CATALOG",
    "CENTOS",
    "DEBIAN",
    "FEDORA",
    "FREEBSD",
    "LINUX",
    "MANJARO",
    "OS_X",
    "SOLARIS",
    "UBUNTU",
    "WEAK_PRIORITY",
    "WINDOWS",
]
