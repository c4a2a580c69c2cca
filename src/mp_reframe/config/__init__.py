"""Config – 12-factor settings and loaders."""

from mp_reframe.config.settings import EnvSettingsLoader, ReframeSettings, Settings, SettingsLoader
from mp_reframe.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ReframeSettings",
    "Settings",
    "SettingsLoader",
]
