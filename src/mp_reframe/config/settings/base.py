"""Config settings – Settings base class and ReframeSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_reframe.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ReframeSettings(Settings):
    """Runtime knobs for the dispatch core.

    Loaded from ``REFRAME_*`` environment variables by
    :class:`~mp_reframe.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "REFRAME"

    log_level: str = "INFO"
    json_logs: bool = True
    trace_dispatch: bool = False
    drain_timeout_seconds: float = 30.0

    def _validate(self) -> None:
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if self.drain_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "drain_timeout_seconds", self.drain_timeout_seconds, "must be positive"
            )


__all__ = ["ReframeSettings", "Settings"]
