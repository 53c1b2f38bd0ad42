"""Logging – LogLevel enum."""
from __future__ import annotations

import logging
from enum import Enum

from hooklog.kernel.errors import InvalidLogLevelError


class LogLevel(str, Enum):
    """Severity levels, ordered ``debug < info < warn < error``.

    Members compare by severity, not alphabetically::

        >>> LogLevel.WARN > LogLevel.INFO
        True
    """

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @property
    def stdlib_level(self) -> int:
        """Matching :mod:`logging` level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, value: LogLevel | str) -> LogLevel:
        """Return the level for *value*.

        Accepts members, case-insensitive names and ``"warning"`` for
        :attr:`WARN`.

        Raises:
            InvalidLogLevelError: *value* names no level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            name = _ALIASES.get(name, name)
            try:
                return cls(name)
            except ValueError:
                pass
        raise InvalidLogLevelError(value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.ordinal >= other.ordinal

    def __str__(self) -> str:
        return self.value


_ORDINALS: dict[LogLevel, int] = {level: index for index, level in enumerate(LogLevel)}

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

_ALIASES = {"warning": "warn"}


__all__ = ["LogLevel"]
