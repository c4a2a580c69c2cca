"""Reframe – StateUpdate: ferries a resolved state to the reducer.

It is the only published value the reframe reducer acts on. Only the
dispatch engine may issue one; constructing it directly raises
:class:`~mp_reframe.kernel.errors.ForgedStateUpdateError`.
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from mp_reframe.kernel.errors import ForgedStateUpdateError

S = TypeVar("S")


class StateUpdate(Generic[S]):
    __slots__ = ("_state",)

    def __init__(self, state: S) -> None:  # noqa: ARG002
        raise ForgedStateUpdateError()

    @classmethod
    def _issue(cls, state: S) -> StateUpdate[S]:
        carrier = object.__new__(cls)
        object.__setattr__(carrier, "_state", state)
        return carrier

    @property
    def state(self) -> S:
        return self._state

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateUpdate):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash((StateUpdate, self._state))

    def __repr__(self) -> str:
        return f"StateUpdate({self._state!r})"


__all__ = ["StateUpdate"]
