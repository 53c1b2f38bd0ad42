"""Unit tests for the hooklog error hierarchy."""

from __future__ import annotations

import pytest

from hooklog.kernel.errors import (
    ConfigError,
    HooklogError,
    InvalidLogLevelError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


class TestHooklogError:
    def test_defaults(self) -> None:
        err = HooklogError("something broke")
        assert err.message == "something broke"
        assert err.code == "hooklog_error"
        assert err.detail == {}
        assert err.cause is None
        assert str(err) == "something broke"

    def test_custom_code_and_detail(self) -> None:
        err = HooklogError("x", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = OSError("disk")
        err = HooklogError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(ConfigError("bad")) == "ConfigError(code='config_error', message='bad')"


class TestConfigErrors:
    @pytest.mark.parametrize(
        "err",
        [
            MissingRequiredSettingError("X"),
            InvalidSettingValueError("x", 1, "nope"),
            InvalidLogLevelError("loud"),
        ],
    )
    def test_are_config_errors(self, err: HooklogError) -> None:
        assert isinstance(err, ConfigError)
        assert isinstance(err, HooklogError)

    def test_missing_required_message(self) -> None:
        err = MissingRequiredSettingError("APP_TOKEN")
        assert "APP_TOKEN" in err.message
        assert err.code == "missing_required_setting"

    def test_invalid_value_fields(self) -> None:
        err = InvalidSettingValueError("port", -1, "must be positive")
        assert (err.setting_name, err.value, err.reason) == ("port", -1, "must be positive")
        assert "must be positive" in str(err)

    def test_invalid_level_lists_choices(self) -> None:
        err = InvalidLogLevelError("loud")
        assert err.value == "loud"
        assert "debug, info, warn, error" in err.message
