"""Application reframe – events, responses and the dispatch engine."""
from mp_reframe.application.reframe.event import Event, Handler
from mp_reframe.application.reframe.factory import ReframeStore, make_store
from mp_reframe.application.reframe.middleware import ReframeMiddleware
from mp_reframe.application.reframe.reducer import reframe_reducer
from mp_reframe.application.reframe.response import Response
from mp_reframe.application.reframe.state_update import StateUpdate
from mp_reframe.application.reframe.substate import HandlerWrapper, SubstateHandlerWrapper

__all__ = [
    "Event",
    "Handler",
    "HandlerWrapper",
    "ReframeMiddleware",
    "ReframeStore",
    "Response",
    "StateUpdate",
    "SubstateHandlerWrapper",
    "make_store",
    "reframe_reducer",
]
