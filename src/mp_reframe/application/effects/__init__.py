"""Application effects – side-effect type, helpers and scheduler."""
from mp_reframe.application.effects.effect import SideEffect, no_effect
from mp_reframe.application.effects.helpers import delayed, emit
from mp_reframe.application.effects.scheduler import Dispatch, EffectScheduler

__all__ = [
    "Dispatch",
    "EffectScheduler",
    "SideEffect",
    "delayed",
    "emit",
    "no_effect",
]
