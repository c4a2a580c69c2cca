"""Application store – built-in middleware implementations."""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from mp_reframe.application.store.middleware import Middleware, Next
from mp_reframe.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_reframe.application.store.store import Store


class LoggingMiddleware(Middleware):
    """Log every dispatched value with timing.

    Placed after the dispatch engine it runs once the value's own state
    update has been applied.
    """

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else get_logger(__name__)

    def __call__(self, store: Store[Any], value: Any, next_: Next) -> Any:
        name = type(value).__name__
        start = time.perf_counter()
        try:
            result = next_(value)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            self._log.error("store.dispatch_failed", value_type=name, duration_ms=round(duration, 2))
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.debug("store.dispatched", value_type=name, duration_ms=round(duration, 2))
        return result


__all__ = ["LoggingMiddleware"]
