"""Application store – Middleware base and chain signatures."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from mp_reframe.application.store.store import Store

S = TypeVar("S")

Next = Callable[[Any], Any]
Reducer = Callable[[S, Any], S]


class Middleware(abc.ABC):
    """Single node in the store's dispatch chain.

    Receives every published value before the reducer does. Call
    ``next_(value)`` to pass it on; dispatch new values with
    ``store.dispatch``.
    """

    @abc.abstractmethod
    def __call__(self, store: Store[Any], value: Any, next_: Next) -> Any: ...


type MiddlewareLike = Middleware | Callable[[Store[Any], Any, Next], Any]

__all__ = ["Middleware", "MiddlewareLike", "Next", "Reducer"]
