"""Reframe – Response: what an event does to the app.

A Response describes (1) how the state changes and/or (2) which side-effect
to run. It is a plain value; the dispatch engine applies it.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

from mp_reframe.application.effects.effect import SideEffect, no_effect
from mp_reframe.kernel.types import Nothing, Option, Some

S = TypeVar("S")
B = TypeVar("B")


@dataclasses.dataclass(frozen=True)
class Response(Generic[S]):
    """Immutable pair of an optional next state and a side-effect.

    Two responses are equal when their next states are equal and their
    effects are the same callable.

    Example::

        Response.state_update(state + 1)
        Response.side_effect(delayed(1.0, Increment()))
        Response(next_state=Some(state + 1), effect=emit(Saved()))
    """

    next_state: Option[S] = dataclasses.field(default_factory=Nothing)
    effect: SideEffect = no_effect

    @classmethod
    def state_update(cls, state: S) -> Response[S]:
        return cls(next_state=Some(state))

    @classmethod
    def side_effect(cls, effect: SideEffect) -> Response[Any]:
        return cls(effect=effect)

    @classmethod
    def update_and_effect(cls, state: S, effect: SideEffect) -> Response[S]:
        return cls(next_state=Some(state), effect=effect)

    @classmethod
    def noop(cls) -> Response[Any]:
        return cls()

    @property
    def has_state_update(self) -> bool:
        return self.next_state.is_some()

    @property
    def has_effect(self) -> bool:
        return self.effect is not no_effect

    def map(self, func: Callable[[S], B]) -> Response[B]:
        """Transform the next state (if any) with *func*; the effect is kept."""
        return Response(next_state=self.next_state.map(func), effect=self.effect)


__all__ = ["Response"]
