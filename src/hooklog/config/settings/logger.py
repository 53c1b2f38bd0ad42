"""Config settings – LoggerSettings (``HOOKLOG_*`` environment variables)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from hooklog.config.settings.base import Settings
from hooklog.kernel.errors import InvalidLogLevelError, InvalidSettingValueError


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Settings for a logger built by :func:`create_logger_from_settings`.

    ==================  ==========  ====================================
    variable            default     meaning
    ==================  ==========  ====================================
    HOOKLOG_NAME        ``log``     ``logger`` field of every record
    HOOKLOG_MIN_LEVEL   ``debug``   calls below this level are dropped
    HOOKLOG_CONSOLE     ``true``    install the console hook
    ==================  ==========  ====================================
    """

    _prefix: ClassVar[str] = "HOOKLOG"

    name: str = "log"
    min_level: str = "debug"
    console: bool = True

    def _validate(self) -> None:
        from hooklog.logging.levels import LogLevel

        if not self.name:
            raise InvalidSettingValueError("name", self.name, "must not be empty")
        try:
            LogLevel.parse(self.min_level)
        except InvalidLogLevelError as exc:
            raise InvalidSettingValueError("min_level", self.min_level, exc.message) from exc


__all__ = ["LoggerSettings"]
