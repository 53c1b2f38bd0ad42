"""Config settings – 12-factor env-based configuration."""
from hooklog.config.settings.base import Settings
from hooklog.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from hooklog.config.settings.logger import LoggerSettings

__all__ = ["EnvSettingsLoader", "LoggerSettings", "Settings", "SettingsLoader"]
