"""Application store – state container and middleware chain."""
from mp_reframe.application.store.middleware import Middleware, MiddlewareLike, Next, Reducer
from mp_reframe.application.store.middlewares import LoggingMiddleware
from mp_reframe.application.store.store import Store

__all__ = [
    "LoggingMiddleware",
    "Middleware",
    "MiddlewareLike",
    "Next",
    "Reducer",
    "Store",
]
