"""Reframe – ReframeMiddleware: the dispatch engine.

Reframe uses a single middleware which runs the state updates and
side-effects described by each event's Response::

    value published
      └─ Event?  no ──────────────────────────────┐
         yes                                      │
          ├─ response = value.handle(state, effects)
          ├─ next_state: dispatch(StateUpdate)    │   (synchronous, reaches the reducer)
          ├─ effect:     schedule effect()        │   (events dispatched when it resolves)
          └───────────────────────────────────────┴─ next_(value)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mp_reframe.application.effects.scheduler import EffectScheduler
from mp_reframe.application.reframe.event import Event
from mp_reframe.application.reframe.response import Response
from mp_reframe.application.reframe.state_update import StateUpdate
from mp_reframe.application.store.middleware import Middleware, Next
from mp_reframe.kernel.errors import InvalidResponseError
from mp_reframe.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_reframe.application.store.store import Store

E = TypeVar("E")

_log = get_logger(__name__)


class ReframeMiddleware(Middleware, Generic[E]):
    """Resolve events and apply their responses.

    *effects* is stored once and passed to every ``Event.handle`` call.

    Ordering per event:

    * the new state (if any) is in the store before the event is passed to
      ``next_``, so downstream middleware sees the post-update state;
    * the side-effect is started but not awaited; the events it produces
      are dispatched, in order, whenever it resolves.

    Errors raised by ``handle`` propagate to the caller of ``dispatch``
    before anything is applied.
    """

    def __init__(
        self,
        effects: E,
        *,
        scheduler: EffectScheduler | None = None,
        trace: bool = False,
    ) -> None:
        self._effects = effects
        self._scheduler = scheduler if scheduler is not None else EffectScheduler(trace=trace)
        self._trace = trace

    @property
    def effects(self) -> E:
        return self._effects

    @property
    def scheduler(self) -> EffectScheduler:
        return self._scheduler

    def __call__(self, store: Store[Any], value: Any, next_: Next) -> Any:
        if isinstance(value, Event):
            self._resolve(store, value)
        return next_(value)

    def _resolve(self, store: Store[Any], event: Event[Any, E]) -> None:
        response = event.handle(store.state, self._effects)
        if not isinstance(response, Response):
            raise InvalidResponseError(event, response)
        if response.has_effect:
            self._scheduler.require_loop()

        for new_state in response.next_state:
            store.dispatch(StateUpdate._issue(new_state))  # noqa: SLF001

        if response.has_effect:
            self._scheduler.schedule(response.effect(), store.dispatch, origin=event)

        if self._trace:
            _log.debug(
                "reframe.event.resolved",
                dispatched=event,
                state_updated=response.has_state_update,
                effect_scheduled=response.has_effect,
            )


__all__ = ["ReframeMiddleware"]
