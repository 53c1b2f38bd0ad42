"""Logging – AsyncStructuredLogger.

Same configuration and record format as
:class:`~hooklog.logging.factory.StructuredLogger`, but each level method is a
coroutine that awaits hooks returning awaitables, one after the other.  An
asynchronous hook failure is therefore caught and reported as
``logger_hook_error`` like a synchronous one::

    log = create_async_logger("api", hooks=[ship_to_collector])
    await log.info("user_logged_in", {"userId": 123})
"""
from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from typing import Any

from hooklog.kernel.time import Clock
from hooklog.logging.console import Console
from hooklog.logging.factory import _build_config, _LoggerBase
from hooklog.logging.levels import LogLevel
from hooklog.logging.protocol import LogHook


class AsyncStructuredLogger(_LoggerBase):
    """Logger whose level methods await every hook before returning."""

    async def debug(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        await self._log_at_level(LogLevel.DEBUG, msg, obj)

    async def info(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        await self._log_at_level(LogLevel.INFO, msg, obj)

    async def warn(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        await self._log_at_level(LogLevel.WARN, msg, obj)

    warning = warn

    async def error(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        await self._log_at_level(LogLevel.ERROR, msg, obj)

    async def _log_at_level(self, level: LogLevel, msg: str, obj: Mapping[str, Any] | None) -> None:
        try:
            if level < self._config.min_level:
                return
            entry = self._build_entry(level, msg, obj)
            for hook in self._config.hooks:
                try:
                    result = hook(entry)
                    if inspect.isawaitable(result):
                        await result
                except Exception as exc:  # noqa: BLE001
                    self._report_hook_error(hook, entry, exc)
        except Exception as exc:  # noqa: BLE001
            self._report_logger_error(msg, exc)


def create_async_logger(
    name: str,
    *,
    min_level: LogLevel | str = LogLevel.DEBUG,
    hooks: Iterable[LogHook] | None = None,
    clock: Clock | None = None,
    console: Console | None = None,
) -> AsyncStructuredLogger:
    """Async counterpart of :func:`~hooklog.logging.factory.create_logger`."""
    return AsyncStructuredLogger(
        _build_config(name, min_level=min_level, hooks=hooks, clock=clock, console=console)
    )


__all__ = ["AsyncStructuredLogger", "create_async_logger"]
