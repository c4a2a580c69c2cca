"""Effects – the SideEffect callable type and the no-op effect."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Sequence

# A side-effect asynchronously resolves to a sequence of follow-up events.
type SideEffect = Callable[[], Awaitable[Sequence[Any]]]


async def no_effect() -> list[Any]:
    """The default effect of a Response: resolves to no events."""
    return []


__all__ = ["SideEffect", "no_effect"]
