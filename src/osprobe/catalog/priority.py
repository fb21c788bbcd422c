# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Priority helpers ranking simultaneously eligible versions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial
from typing import Final, TypeVar

ItemT = TypeVar("ItemT")

DEFAULT_PRIORITY: Final[int] = 0


def priority_of(item: object) -> int:
    """Return the declared priority of ``item`` or :data:`DEFAULT_PRIORITY`."""

    value = getattr(item, "priority", DEFAULT_PRIORITY)
    return value if isinstance(value, int) else DEFAULT_PRIORITY


def _descending_rank(item: ItemT, key: Callable[[ItemT], object] | None) -> int:
    target = key(item) if key is not None else item
    return -priority_of(target)


def sorted_by_priority(
    items: Iterable[ItemT],
    key: Callable[[ItemT], object] | None = None,
) -> list[ItemT]:
    """Return ``items`` sorted by descending priority, stable for equal priorities.

    Args:
        items: Entries to sort.
        key: Optional accessor returning the object carrying the priority.

    Returns:
        list[ItemT]: New list, highest priority first.
    """

    return sorted(items, key=partial(_descending_rank, key=key))


__all__ = ["DEFAULT_PRIORITY", "priority_of", "sorted_by_priority"]
