# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Composable lookup chains dispatching on the runtime kind of an object.

Attribute extractors and matchers are both registered per *kind* (a Python
class).  A chain is an immutable tuple of links; each link either claims
instances of its kind or defers to the next link.  The optional failing
link terminates a chain and turns an unclaimed kind into a hard
:class:`~osprobe.errors.UnhandledKindError` instead of a silent miss.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Generic, Self, TypeVar

from .errors import UnhandledKindError

HandlerT = TypeVar("HandlerT")


@dataclass(frozen=True, slots=True)
class _KindLink(Generic[HandlerT]):
    """Link claiming every instance of ``kind``."""

    kind: type
    handler: HandlerT

    def claims(self, item: object) -> bool:
        return isinstance(item, self.kind)


@dataclass(frozen=True, slots=True)
class _FailingLink:
    """Terminal link reached only when no earlier link claimed the item."""


class KindLookup(Generic[HandlerT]):
    """Ordered chain of handlers keyed by the runtime kind of the looked-up item."""

    role: ClassVar[str] = "handler"

    __slots__ = ("_links",)

    def __init__(self, links: tuple[_KindLink[HandlerT] | _FailingLink, ...] = ()) -> None:
        self._links = links

    @classmethod
    def with_(cls, kind: type, handler: HandlerT) -> Self:
        """Return a single-link chain registering ``handler`` for ``kind``.

        Args:
            kind: Class whose instances (subclasses included) the handler accepts.
            handler: Strategy object applied to claimed instances.

        Returns:
            Self: New chain containing only the registration.
        """

        return cls((_KindLink(kind, handler),))

    @classmethod
    def failing(cls) -> Self:
        """Return the terminal chain that raises for any item reaching it."""

        return cls((_FailingLink(),))

    @classmethod
    def empty(cls) -> Self:
        """Return a chain claiming nothing, yielding ``None`` for every lookup."""

        return cls()

    def join(self, other: KindLookup[HandlerT]) -> Self:
        """Return a new chain trying ``self`` first and ``other`` afterwards.

        Args:
            other: Chain consulted when no link of ``self`` claims the item.

        Returns:
            Self: Combined chain; neither operand is modified.
        """

        return type(self)(self._links + other._links)

    def handler(self, item: object) -> HandlerT | None:
        """Return the handler registered for the kind of ``item``.

        Args:
            item: Attribute or match specification to dispatch on.

        Returns:
            HandlerT | None: First claiming handler, or ``None`` when the chain
            ends without a claim and without a failing terminal.

        Raises:
            UnhandledKindError: If the failing terminal is reached.
        """

        for link in self._links:
            if isinstance(link, _FailingLink):
                raise UnhandledKindError(self.role, item)
            if link.claims(item):
                return link.handler
        return None

    @property
    def kinds(self) -> tuple[type, ...]:
        """Return the registered kinds in lookup order."""

        return tuple(link.kind for link in self._iter_kind_links())

    @property
    def is_terminated(self) -> bool:
        """Return ``True`` when the chain contains a failing terminal."""

        return any(isinstance(link, _FailingLink) for link in self._links)

    def _iter_kind_links(self) -> Iterator[_KindLink[HandlerT]]:
        for link in self._links:
            if isinstance(link, _KindLink):
                yield link

    def __repr__(self) -> str:
        names = [kind.__name__ for kind in self.kinds]
        if self.is_terminated:
            names.append("<failing>")
        return f"{type(self).__name__}({' -> '.join(names)})"


__all__ = ["KindLookup"]
