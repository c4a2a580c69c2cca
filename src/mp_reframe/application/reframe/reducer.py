"""Reframe – the single reducer.

Ordinary reducer logic lives in each event's ``handle``; this reducer only
swaps in the state carried by a :class:`StateUpdate`.
"""
from __future__ import annotations

from typing import Any, TypeVar

from mp_reframe.application.reframe.state_update import StateUpdate

S = TypeVar("S")


def reframe_reducer(state: S, value: Any) -> S:
    return value.state if isinstance(value, StateUpdate) else state


__all__ = ["reframe_reducer"]
