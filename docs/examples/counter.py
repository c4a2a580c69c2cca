"""Counter example: a pure event and a delayed one sharing one store.

Run with::

    python docs/examples/counter.py
"""

from __future__ import annotations

import asyncio
import dataclasses

from mp_reframe.application.effects import delayed
from mp_reframe.application.reframe import Event, Response, make_store
from mp_reframe.application.store import LoggingMiddleware
from mp_reframe.config import EnvSettingsLoader, ReframeSettings
from mp_reframe.observability.logging import configure_logging, get_logger

log = get_logger("counter")


@dataclasses.dataclass(frozen=True)
class Effects:
    """Normally for dependency injection; here, unused."""


@dataclasses.dataclass(frozen=True)
class Increment(Event[int, Effects]):
    def handle(self, state: int, effects: Effects) -> Response[int]:
        return Response.state_update(state + 1)


@dataclasses.dataclass(frozen=True)
class AsyncIncrement(Event[int, Effects]):
    wait_seconds: float

    def handle(self, state: int, effects: Effects) -> Response[int]:
        return Response.side_effect(delayed(self.wait_seconds, Increment()))


async def main() -> None:
    settings = EnvSettingsLoader().load(ReframeSettings)
    configure_logging(settings)

    store = make_store(0, Effects(), middleware=[LoggingMiddleware()], settings=settings)
    store.dispatch(Increment())
    log.info("counter.incremented", state=store.state)

    store.dispatch(AsyncIncrement(1.0))
    log.info("counter.scheduled", state=store.state, pending=store.scheduler.pending)

    await store.settle()
    log.info("counter.settled", state=store.state)


if __name__ == "__main__":
    asyncio.run(main())
