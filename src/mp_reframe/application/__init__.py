"""Application – dispatch core building blocks."""

from mp_reframe.application.effects import EffectScheduler, SideEffect, delayed, emit, no_effect
from mp_reframe.application.reframe import (
    Event,
    Handler,
    HandlerWrapper,
    ReframeMiddleware,
    ReframeStore,
    Response,
    StateUpdate,
    SubstateHandlerWrapper,
    make_store,
    reframe_reducer,
)
from mp_reframe.application.store import LoggingMiddleware, Middleware, Next, Store

__all__ = [
    "EffectScheduler",
    "Event",
    "Handler",
    "HandlerWrapper",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "ReframeMiddleware",
    "ReframeStore",
    "Response",
    "SideEffect",
    "StateUpdate",
    "Store",
    "SubstateHandlerWrapper",
    "delayed",
    "emit",
    "make_store",
    "no_effect",
    "reframe_reducer",
]
