"""Kernel – framework-agnostic building blocks."""

from mp_reframe.kernel.errors import (
    DispatchError,
    EffectTimeoutError,
    ForgedStateUpdateError,
    InvalidResponseError,
    NoEventLoopError,
    ReframeError,
)
from mp_reframe.kernel.types import Nothing, Option, Some

__all__ = [
    "DispatchError",
    "EffectTimeoutError",
    "ForgedStateUpdateError",
    "InvalidResponseError",
    "NoEventLoopError",
    "Nothing",
    "Option",
    "ReframeError",
    "Some",
]
