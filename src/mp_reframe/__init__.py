"""
mp_reframe – event dispatch core coupling state updates and side-effects.

Import path convention::

    from mp_reframe.application.reframe import Event, Response, make_store
    from mp_reframe.application.effects import delayed, emit
    from mp_reframe.kernel.errors import ForgedStateUpdateError
    from mp_reframe.config import EnvSettingsLoader, ReframeSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
