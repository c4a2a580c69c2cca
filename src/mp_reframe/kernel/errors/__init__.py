"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    ReframeError
    ├── DispatchError            (dispatch.py)
    │   ├── ForgedStateUpdateError
    │   ├── InvalidResponseError
    │   └── NoEventLoopError
    ├── EffectTimeoutError       (dispatch.py)
    └── ConfigError              (mp_reframe.config.validation)
"""

from mp_reframe.kernel.errors.base import ReframeError
from mp_reframe.kernel.errors.dispatch import (
    DispatchError,
    EffectTimeoutError,
    ForgedStateUpdateError,
    InvalidResponseError,
    NoEventLoopError,
)

__all__ = [
    "DispatchError",
    "EffectTimeoutError",
    "ForgedStateUpdateError",
    "InvalidResponseError",
    "NoEventLoopError",
    "ReframeError",
]
