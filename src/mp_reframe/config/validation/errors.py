"""Errors raised while loading and validating ``ReframeSettings``.

All of them derive from :class:`ConfigError`, which is itself a
:class:`~mp_reframe.kernel.errors.ReframeError`, so a single
``except ReframeError`` covers both dispatch and configuration failures.
"""
from mp_reframe.kernel.errors import ReframeError


class ConfigError(ReframeError):
    """A settings class could not be built from its environment."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no ``<PREFIX>_<FIELD>`` variable set.

    ``setting_name`` holds the full variable name, e.g. ``APP_NAME``.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Environment variable '{setting_name}' is required but not set")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A field was parsed but fails validation (unknown log level, non-positive timeout)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} rejected: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
