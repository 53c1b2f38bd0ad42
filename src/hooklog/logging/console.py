"""Logging – console sink with one stream per level."""
from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO

from hooklog.logging.levels import LogLevel


class Console:
    """Writes text lines to the stream bound to each :class:`LogLevel`.

    Levels without an explicit stream go to ``sys.stdout`` (debug, info) or
    ``sys.stderr`` (warn, error), looked up at write time so redirected
    streams are honoured.
    """

    def __init__(self, streams: Mapping[LogLevel | str, TextIO] | None = None) -> None:
        self._streams: dict[LogLevel, TextIO] = {
            LogLevel.parse(level): stream for level, stream in (streams or {}).items()
        }

    def stream_for(self, level: LogLevel) -> TextIO:
        stream = self._streams.get(level)
        if stream is not None:
            return stream
        return sys.stderr if level >= LogLevel.WARN else sys.stdout

    def write(self, level: LogLevel, text: str) -> None:
        stream = self.stream_for(level)
        stream.write(text + "\n")
        stream.flush()

    def debug(self, text: str) -> None:
        self.write(LogLevel.DEBUG, text)

    def info(self, text: str) -> None:
        self.write(LogLevel.INFO, text)

    def warn(self, text: str) -> None:
        self.write(LogLevel.WARN, text)

    def error(self, text: str) -> None:
        self.write(LogLevel.ERROR, text)


console = Console()

__all__ = ["Console", "console"]
