"""Unit tests for config settings & loaders."""

import dataclasses
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from hooklog.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LoggerSettings,
    MissingRequiredSettingError,
    Settings,
)


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


@dataclass
class ValidatedSettings(Settings):
    _prefix: ClassVar[str] = "VAL"

    port: int = 1

    def _validate(self) -> None:
        if self.port <= 0:
            raise ValueError("port must be positive")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(AppSettings)
        assert settings == AppSettings()

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_PORT": "9000", "APP_RATIO": "0.25"}).load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    @pytest.mark.parametrize("truthy", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, truthy: str) -> None:
        assert EnvSettingsLoader(environ={"APP_DEBUG": truthy}).load(AppSettings).debug is True

    @pytest.mark.parametrize("falsy", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, falsy: str) -> None:
        assert EnvSettingsLoader(environ={"APP_DEBUG": falsy}).load(AppSettings).debug is False

    def test_loads_list(self) -> None:
        settings = EnvSettingsLoader(environ={"APP_ALLOWED_ORIGINS": "a.com, b.com,,"}).load(AppSettings)
        assert settings.allowed_origins == ["a.com", "b.com"]

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_bad_coercion_wrapped(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ={"APP_PORT": "not-a-number"}).load(AppSettings)

    def test_validation_failure_wrapped(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader(environ={"VAL_PORT": "0"}).load(ValidatedSettings)
        assert isinstance(exc_info.value.cause, ValueError)


# ---------------------------------------------------------------------------
# LoggerSettings
# ---------------------------------------------------------------------------


class TestLoggerSettings:
    def test_defaults(self) -> None:
        settings = LoggerSettings()
        assert (settings.name, settings.min_level, settings.console) == ("log", "debug", True)

    def test_env_prefix(self) -> None:
        settings = EnvSettingsLoader(
            environ={"HOOKLOG_NAME": "api", "HOOKLOG_MIN_LEVEL": "error", "HOOKLOG_CONSOLE": "0"}
        ).load(LoggerSettings)
        assert settings == LoggerSettings(name="api", min_level="error", console=False)

    def test_invalid_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LoggerSettings(min_level="loud")
        assert exc_info.value.setting_name == "min_level"

    def test_invalid_level_from_env_not_rewrapped(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"HOOKLOG_MIN_LEVEL": "loud"}).load(LoggerSettings)

    def test_empty_name(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LoggerSettings(name="")

    def test_is_dataclass(self) -> None:
        assert [f.name for f in dataclasses.fields(LoggerSettings)] == ["name", "min_level", "console"]
