"""Reframe – handler wrappers for events that only touch part of the state.

Usage::

    class CounterHandlerWrapper(SubstateHandlerWrapper[AppState, CounterState, Effects]):
        def select(self, state: AppState) -> CounterState:
            return state.counter

        def merge(self, state: AppState, sub: CounterState) -> AppState:
            return dataclasses.replace(state, counter=sub)


    @dataclasses.dataclass(frozen=True)
    class IncrementCounter(CounterHandlerWrapper, Event[AppState, Effects]):
        def handle(self, state: AppState, effects: Effects) -> Response[AppState]:
            return self.handler_wrapper(
                state,
                effects,
                lambda counter, _: Response.state_update(
                    dataclasses.replace(counter, count=counter.count + 1)
                ),
            )
"""
from __future__ import annotations

import abc
from typing import Generic, TypeVar

from mp_reframe.application.reframe.event import Handler
from mp_reframe.application.reframe.response import Response

S = TypeVar("S")
T = TypeVar("T")
E = TypeVar("E")


class HandlerWrapper(abc.ABC, Generic[S, T, E]):
    """Lift a handler over sub-state ``T`` into a handler over state ``S``."""

    @abc.abstractmethod
    def handler_wrapper(self, state: S, effects: E, handler: Handler[T, E]) -> Response[S]: ...


class SubstateHandlerWrapper(HandlerWrapper[S, T, E]):
    """HandlerWrapper defined by a ``select``/``merge`` pair."""

    @abc.abstractmethod
    def select(self, state: S) -> T: ...

    @abc.abstractmethod
    def merge(self, state: S, sub: T) -> S: ...

    def handler_wrapper(self, state: S, effects: E, handler: Handler[T, E]) -> Response[S]:
        return handler(self.select(state), effects).map(lambda sub: self.merge(state, sub))


__all__ = ["HandlerWrapper", "SubstateHandlerWrapper"]
