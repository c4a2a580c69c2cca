"""Effects – factories for common side-effects.

Usage::

    @dataclasses.dataclass(frozen=True)
    class AsyncIncrement(Event[int, Effects]):
        wait_seconds: float

        def handle(self, state: int, effects: Effects) -> Response[int]:
            return Response.side_effect(delayed(self.wait_seconds, Increment()))
"""
from __future__ import annotations

import asyncio
from typing import Any

from mp_reframe.application.effects.effect import SideEffect


def emit(*events: Any) -> SideEffect:
    """Return an effect that resolves straight away to *events*."""

    async def _emit() -> list[Any]:
        return list(events)

    return _emit


def delayed(seconds: float, *events: Any) -> SideEffect:
    """Return an effect that waits *seconds* then resolves to *events*."""
    if seconds < 0:
        raise ValueError(f"delay must be non-negative, got {seconds}")

    async def _delayed() -> list[Any]:
        await asyncio.sleep(seconds)
        return list(events)

    return _delayed


__all__ = ["delayed", "emit"]
