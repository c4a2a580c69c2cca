"""Reframe – Event contract."""
from __future__ import annotations

import abc
from typing import Callable, Generic, TypeVar

from mp_reframe.application.reframe.response import Response

S = TypeVar("S")
E = TypeVar("E")
T = TypeVar("T")

Handler = Callable[[T, E], Response[T]]


class Event(abc.ABC, Generic[S, E]):
    """Base class for everything the dispatch engine resolves.

    ``handle`` describes the state change and side-effect of the event and
    nothing more: it must not mutate shared state or start async work
    itself. *effects* is the application's dependency bag, handed over
    unchanged on every call; use it to build the returned effect.

    Subclasses should be immutable values.

    Example::

        @dataclasses.dataclass(frozen=True)
        class Increment(Event[int, Effects]):
            def handle(self, state: int, effects: Effects) -> Response[int]:
                return Response.state_update(state + 1)
    """

    @abc.abstractmethod
    def handle(self, state: S, effects: E) -> Response[S]: ...


__all__ = ["Event", "Handler"]
