"""Configuration errors – raised while building loggers, never inside a log call."""

from __future__ import annotations

from hooklog.kernel.errors.base import HooklogError


class ConfigError(HooklogError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidLogLevelError(ConfigError):
    """A level name does not match any :class:`~hooklog.logging.LogLevel`."""

    default_code = "invalid_log_level"

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unknown log level {value!r}; expected one of debug, info, warn, error"
        )
        self.value = value


__all__ = [
    "ConfigError",
    "InvalidLogLevelError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
