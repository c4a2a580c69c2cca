"""Config settings – 12-factor env-based configuration."""
from mp_reframe.config.settings.base import ReframeSettings, Settings
from mp_reframe.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ReframeSettings", "Settings", "SettingsLoader"]
