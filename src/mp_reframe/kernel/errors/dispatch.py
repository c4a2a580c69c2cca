"""Dispatch errors — misuse of the dispatch core and effect failures it reports."""

from __future__ import annotations

from typing import Any

from mp_reframe.kernel.errors.base import ReframeError


class DispatchError(ReframeError):
    """A published value could not be dispatched."""

    default_code = "dispatch_error"


class ForgedStateUpdateError(DispatchError):
    """Application code tried to construct a ``StateUpdate`` carrier directly."""

    default_code = "forged_state_update"

    def __init__(self, message: str = "StateUpdate can only be issued by the dispatch engine", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class InvalidResponseError(DispatchError):
    """An event's ``handle`` returned something other than a ``Response``."""

    default_code = "invalid_response"

    def __init__(self, event: object, returned: object, **kwargs: Any) -> None:
        super().__init__(
            f"{type(event).__name__}.handle() must return a Response, got {type(returned).__name__}",
            detail={"event": type(event).__name__, "returned": type(returned).__name__},
            **kwargs,
        )
        self.event = event
        self.returned = returned


class NoEventLoopError(DispatchError):
    """A side-effect was scheduled outside a running asyncio event loop."""

    default_code = "no_event_loop"


class EffectTimeoutError(ReframeError):
    """Pending side-effects did not settle within the allotted time."""

    default_code = "effect_timeout"

    def __init__(self, timeout: float, pending: int, **kwargs: Any) -> None:
        super().__init__(
            f"{pending} side-effect(s) still pending after {timeout}s",
            detail={"timeout": timeout, "pending": pending},
            **kwargs,
        )
        self.timeout = timeout
        self.pending = pending


__all__ = [
    "DispatchError",
    "EffectTimeoutError",
    "ForgedStateUpdateError",
    "InvalidResponseError",
    "NoEventLoopError",
]
