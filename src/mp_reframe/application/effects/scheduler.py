"""Effects – EffectScheduler: runs side-effects as asyncio tasks.

A side-effect resolves some time after the dispatch that produced it. The
scheduler wraps it in a task whose continuation dispatches the produced
events, in order, through the store's ``dispatch``. It holds a strong
reference to each task until it finishes; asyncio only keeps weak ones.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Sequence

from mp_reframe.kernel.errors import EffectTimeoutError, NoEventLoopError
from mp_reframe.observability.logging import get_logger

Dispatch = Callable[[Any], Any]

_log = get_logger(__name__)


class EffectScheduler:
    """Track and run pending side-effects.

    There is no cancellation: once scheduled, an effect runs to completion.
    A failed effect's exception is kept until :meth:`drain` re-raises it,
    whether the effect failed before or during the drain.

    With *trace* set, each resolved effect is logged at debug level.
    """

    def __init__(self, *, trace: bool = False) -> None:
        self._pending: set[asyncio.Task[None]] = set()
        self._failures: list[BaseException] = []
        self._trace = trace

    @property
    def pending(self) -> int:
        """Number of side-effects that have not finished yet."""
        return sum(1 for task in self._pending if not task.done())

    @property
    def failed(self) -> int:
        """Number of effect failures not yet raised by :meth:`drain`."""
        return len(self._failures)

    def require_loop(self) -> asyncio.AbstractEventLoop:
        """Return the running event loop or raise :class:`NoEventLoopError`."""
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise NoEventLoopError(
                "Side-effects need a running asyncio event loop; dispatch from inside a coroutine",
                cause=exc,
            ) from exc

    def schedule(
        self,
        awaitable: Awaitable[Sequence[Any]],
        dispatch: Dispatch,
        *,
        origin: Any = None,
    ) -> asyncio.Task[None]:
        """Deliver the events *awaitable* resolves to through *dispatch*."""
        loop = self.require_loop()
        task = loop.create_task(self._deliver(awaitable, dispatch, origin))
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._failures.append(exc)

    async def _deliver(
        self,
        awaitable: Awaitable[Sequence[Any]],
        dispatch: Dispatch,
        origin: Any,
    ) -> None:
        events = list(await awaitable)
        if self._trace:
            _log.debug("reframe.effect.resolved", origin=origin, events=len(events))
        for event in events:
            dispatch(event)

    def _raise_first_failure(self) -> None:
        if self._failures:
            raise self._failures.pop(0)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait until no side-effect is pending.

        Effects scheduled by events dispatched while draining are awaited
        too. The oldest unreported failure is re-raised, including one from
        an effect that failed before ``drain`` was called. Raises
        :class:`EffectTimeoutError` if effects are still pending after
        *timeout* seconds; they keep running.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            self._raise_first_failure()
            waiting = {task for task in self._pending if not task.done()}
            if not waiting:
                return
            remaining = None if deadline is None else deadline - loop.time()
            if remaining is not None and remaining <= 0:
                raise EffectTimeoutError(timeout, len(waiting))  # type: ignore[arg-type]
            await asyncio.wait(waiting, timeout=remaining)


__all__ = ["Dispatch", "EffectScheduler"]
