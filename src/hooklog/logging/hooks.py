"""Logging – built-in hooks.

* :class:`ConsoleHook` / :data:`console_hook` – prints ``formatted`` to the
  console stream of the record's level (the default hook).
* :class:`StdlibLoggingHook` – forwards records to :mod:`logging`.
* :class:`StructlogHook` – forwards records to a structlog bound logger.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from hooklog.logging.console import Console, console
from hooklog.logging.levels import LogLevel
from hooklog.logging.protocol import LogHookArgs
from hooklog.serialization import to_jsonable


class ConsoleHook:
    """Write the formatted record to *console* at the record's level."""

    name = "console_hook"

    def __init__(self, target: Console | None = None) -> None:
        self._console = target or console

    def __call__(self, args: LogHookArgs) -> None:
        self._console.write(args.level, args.formatted)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._console!r})"


console_hook = ConsoleHook()


class StdlibLoggingHook:
    """Forward records to a standard :class:`logging.Logger`.

    The message is ``args.msg``; the rest of the record is attached to the
    :class:`logging.LogRecord` as ``record.hooklog`` (``logger``, ``ts``,
    ``obj`` rendered JSON-safe, ``formatted``).

    Parameters
    ----------
    logger:
        Target logger.  Defaults to ``logging.getLogger(args.logger)`` so each
        hooklog logger name maps onto the stdlib logger hierarchy.
    """

    name = "stdlib_logging_hook"

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger

    def __call__(self, args: LogHookArgs) -> None:
        target = self._logger or logging.getLogger(args.logger)
        target.log(
            args.level.stdlib_level,
            args.msg,
            extra={
                "hooklog": {
                    "logger": args.logger,
                    "ts": args.ts,
                    "obj": None if args.obj is None else to_jsonable(args.obj),
                    "formatted": args.formatted,
                }
            },
        )


_STRUCTLOG_METHODS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
}


class StructlogHook:
    """Forward records to structlog.

    Each record becomes one structlog event named ``args.msg`` with ``ts``
    and, when a payload was given, ``obj`` (already JSON-safe, so cycles and
    exceptions never reach structlog's renderers).

    Parameters
    ----------
    logger:
        A structlog bound logger.  Defaults to
        ``structlog.get_logger(args.logger)``.
    """

    name = "structlog_hook"

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger

    def __call__(self, args: LogHookArgs) -> None:
        target = self._logger if self._logger is not None else structlog.get_logger(args.logger)
        method = getattr(target, _STRUCTLOG_METHODS[args.level])
        fields: dict[str, Any] = {"ts": args.ts}
        if args.obj is not None:
            fields["obj"] = to_jsonable(args.obj)
        method(args.msg, **fields)


__all__ = [
    "ConsoleHook",
    "StdlibLoggingHook",
    "StructlogHook",
    "console_hook",
]
