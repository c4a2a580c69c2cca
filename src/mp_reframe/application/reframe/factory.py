"""Reframe – ReframeStore and make_store factory.

Usage::

    store = make_store(0, Effects(), middleware=[LoggingMiddleware()])

    async def main() -> None:
        store.dispatch(AsyncIncrement(1.0))
        await store.settle()
        assert store.state == 1
"""
from __future__ import annotations

from typing import Any, Iterable, TypeVar

from mp_reframe.application.effects.scheduler import EffectScheduler
from mp_reframe.application.reframe.middleware import ReframeMiddleware
from mp_reframe.application.reframe.reducer import reframe_reducer
from mp_reframe.application.store.middleware import MiddlewareLike
from mp_reframe.application.store.store import Store
from mp_reframe.config.settings import ReframeSettings

S = TypeVar("S")
E = TypeVar("E")


class ReframeStore(Store[S]):
    """Store wired with the reframe reducer and dispatch engine."""

    def __init__(
        self,
        initial_state: S,
        engine: ReframeMiddleware[Any],
        *,
        middleware: Iterable[MiddlewareLike] = (),
        settings: ReframeSettings | None = None,
    ) -> None:
        super().__init__(reframe_reducer, initial_state=initial_state, middleware=[engine, *middleware])
        self._engine = engine
        self._settings = settings or ReframeSettings()

    @property
    def scheduler(self) -> EffectScheduler:
        return self._engine.scheduler

    async def settle(self, timeout: float | None = None) -> None:
        """Wait for every pending side-effect (and the ones they trigger)."""
        await self.scheduler.drain(timeout if timeout is not None else self._settings.drain_timeout_seconds)


def make_store(
    initial_state: S,
    effects: E,
    *,
    middleware: Iterable[MiddlewareLike] = (),
    scheduler: EffectScheduler | None = None,
    settings: ReframeSettings | None = None,
) -> ReframeStore[S]:
    """Build a :class:`ReframeStore` whose first middleware is the dispatch engine.

    *middleware* runs after the engine, in the given order.
    """
    settings = settings or ReframeSettings()
    engine = ReframeMiddleware(effects, scheduler=scheduler, trace=settings.trace_dispatch)
    return ReframeStore(initial_state, engine, middleware=middleware, settings=settings)


__all__ = ["ReframeStore", "make_store"]
