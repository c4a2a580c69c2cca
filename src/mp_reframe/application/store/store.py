"""Application store – Store: state container with a synchronous middleware chain."""
from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from mp_reframe.application.store.middleware import MiddlewareLike, Next, Reducer

S = TypeVar("S")


class Store(Generic[S]):
    """Holds the current state and routes every dispatched value through
    the middleware chain and then the reducer.

    The first middleware is the outermost one. ``dispatch`` may be called
    again from inside a middleware; the nested dispatch runs the whole chain
    and completes before the outer call continues.

    Usage::

        store = Store(reframe_reducer, initial_state=0, middleware=[ReframeMiddleware(effects)])
        store.dispatch(Increment())
        assert store.state == 1
    """

    def __init__(
        self,
        reducer: Reducer[S],
        *,
        initial_state: S,
        middleware: Iterable[MiddlewareLike] = (),
    ) -> None:
        self._reducer = reducer
        self._state = initial_state
        self._middleware = list(middleware)
        self._dispatcher = self._build_chain()

    @property
    def state(self) -> S:
        return self._state

    def dispatch(self, value: Any) -> Any:
        """Publish *value*; returns whatever the chain returns."""
        return self._dispatcher(value)

    def _reduce(self, value: Any) -> Any:
        self._state = self._reducer(self._state, value)
        return value

    def _build_chain(self) -> Next:
        chain: Next = self._reduce
        for mw in reversed(self._middleware):

            def _wrap(value: Any, *, _n: Next = chain, _m: MiddlewareLike = mw) -> Any:
                return _m(self, value, _n)

            chain = _wrap
        return chain

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r})"


__all__ = ["Store"]
