"""Config – 12-factor settings and loaders."""

from hooklog.config.settings import EnvSettingsLoader, LoggerSettings, Settings, SettingsLoader
from hooklog.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
