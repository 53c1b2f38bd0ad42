"""Logging – LoggerConfig, StructuredLogger and the ``create_logger`` factory.

A log call runs through three steps:

1. level filter – calls below ``min_level`` return before the clock is read
   or anything is serialized;
2. the record is stamped and rendered once into ``formatted``;
3. every hook gets the same :class:`LogHookArgs`, in configured order.

Nothing raised inside a call reaches the caller.  A hook that raises is
reported as a ``logger_hook_error`` record and the remaining hooks still
run; any other failure (typically a payload that cannot be read) is reported
as ``logger_error``.  Both diagnostics go straight to the console error
stream, never through hooks.

Hooks returning an awaitable are not waited on: inside a running event loop
the awaitable is scheduled as a task and the call returns, so its failure
surfaces through asyncio's unhandled-exception reporting, not here.  Outside
an event loop it is run to completion on the spot.  See
:class:`~hooklog.logging.async_logger.AsyncStructuredLogger` for a variant
that awaits every hook.
"""
from __future__ import annotations

import asyncio
import dataclasses
import inspect
from collections.abc import Awaitable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, Self

from hooklog.kernel.errors import ConfigError
from hooklog.kernel.time import Clock, SystemClock, iso_timestamp
from hooklog.logging.console import Console, console as default_console
from hooklog.logging.formatting import format_failure, format_message
from hooklog.logging.hooks import ConsoleHook, console_hook
from hooklog.logging.levels import LogLevel
from hooklog.logging.protocol import LogHook, LogHookArgs, hook_name
from hooklog.serialization import serialize_error

if TYPE_CHECKING:
    from hooklog.config.settings import LoggerSettings

HOOK_ERROR_MSG = "logger_hook_error"
LOGGER_ERROR_MSG = "logger_error"


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    """Immutable configuration captured when a logger is created.

    ``hooks=()`` formats records but delivers them nowhere.  ``console`` is
    where failure diagnostics are written.
    """

    name: str
    min_level: LogLevel = LogLevel.DEBUG
    hooks: tuple[LogHook, ...] = (console_hook,)
    clock: Clock = dataclasses.field(default_factory=SystemClock)
    console: Console = default_console

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ConfigError("Logger name must be a non-empty string", detail={"name": repr(self.name)})
        object.__setattr__(self, "min_level", LogLevel.parse(self.min_level))
        object.__setattr__(self, "hooks", tuple(self.hooks))
        for hook in self.hooks:
            if not callable(hook):
                raise ConfigError(f"Hook {hook!r} is not callable", detail={"logger": self.name})


class _LoggerBase:
    """State and failure reporting shared by the sync and async loggers."""

    def __init__(self, config: LoggerConfig) -> None:
        self._config = config

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def min_level(self) -> LogLevel:
        return self._config.min_level

    def is_enabled_for(self, level: LogLevel | str) -> bool:
        """Whether a call at *level* would reach the hooks."""
        return LogLevel.parse(level) >= self._config.min_level

    def child(self, suffix: str) -> Self:
        """Return a new logger named ``"<name>.<suffix>"`` with the same settings."""
        return type(self)(dataclasses.replace(self._config, name=f"{self._config.name}.{suffix}"))

    def _now(self) -> str:
        return iso_timestamp(self._config.clock.now())

    def _build_entry(self, level: LogLevel, msg: str, obj: Mapping[str, Any] | None) -> LogHookArgs:
        ts = self._now()
        return LogHookArgs(
            logger=self._config.name,
            ts=ts,
            level=level,
            msg=msg,
            obj=obj,
            formatted=format_message(self._config.name, ts, msg, obj),
        )

    def _report_hook_error(self, hook: LogHook, entry: LogHookArgs, exc: BaseException) -> None:
        self._config.console.error(
            format_failure(
                self._now(),
                HOOK_ERROR_MSG,
                serialize_error(exc),
                {"failedHook": hook_name(hook), "originalEntry": entry},
            )
        )

    def _report_logger_error(self, msg: str, exc: BaseException) -> None:
        try:
            self._config.console.error(
                format_failure(self._now(), LOGGER_ERROR_MSG, serialize_error(exc), {"msg": msg})
            )
        except Exception:  # noqa: BLE001
            # the console itself is failing; nowhere left to report
            pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, min_level={self.min_level.value!r})"


class StructuredLogger(_LoggerBase):
    """Logger exposing ``debug``/``info``/``warn``/``error``; every call returns ``None``."""

    def __init__(self, config: LoggerConfig) -> None:
        super().__init__(config)
        self._pending: set[asyncio.Future[Any]] = set()

    def debug(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        self._log_at_level(LogLevel.DEBUG, msg, obj)

    def info(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        self._log_at_level(LogLevel.INFO, msg, obj)

    def warn(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        self._log_at_level(LogLevel.WARN, msg, obj)

    # stdlib spelling
    warning = warn

    def error(self, msg: str, obj: Mapping[str, Any] | None = None) -> None:
        self._log_at_level(LogLevel.ERROR, msg, obj)

    def _log_at_level(self, level: LogLevel, msg: str, obj: Mapping[str, Any] | None) -> None:
        try:
            if level < self._config.min_level:
                return
            entry = self._build_entry(level, msg, obj)
            for hook in self._config.hooks:
                try:
                    result = hook(entry)
                    if inspect.isawaitable(result):
                        self._fire_and_forget(result)
                except Exception as exc:  # noqa: BLE001
                    self._report_hook_error(hook, entry, exc)
        except Exception as exc:  # noqa: BLE001
            self._report_logger_error(msg, exc)

    def _fire_and_forget(self, awaitable: Awaitable[Any]) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_wait(awaitable))
            return
        future = asyncio.ensure_future(awaitable)
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)


async def _wait(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _build_config(
    name: str,
    *,
    min_level: LogLevel | str,
    hooks: Iterable[LogHook] | None,
    clock: Clock | None,
    console: Console | None,
) -> LoggerConfig:
    target = console or default_console
    if hooks is None:
        hooks = (console_hook,) if target is default_console else (ConsoleHook(target),)
    return LoggerConfig(
        name=name,
        min_level=LogLevel.parse(min_level),
        hooks=tuple(hooks),
        clock=clock or SystemClock(),
        console=target,
    )


def create_logger(
    name: str,
    *,
    min_level: LogLevel | str = LogLevel.DEBUG,
    hooks: Iterable[LogHook] | None = None,
    clock: Clock | None = None,
    console: Console | None = None,
) -> StructuredLogger:
    """Create a :class:`StructuredLogger`.

    Parameters
    ----------
    name:
        Emitted as the ``logger`` field of every record.
    min_level:
        Calls below this level are dropped (``"debug"`` by default).
    hooks:
        Ordered output targets.  Defaults to the console hook; ``[]`` means
        format but deliver nowhere.
    clock:
        Time source for ``ts`` (defaults to :class:`SystemClock`).
    console:
        Console for failure diagnostics and for the default console hook.

    Raises
    ------
    ConfigError
        Empty name, unknown level or a non-callable hook.
    """
    return StructuredLogger(
        _build_config(name, min_level=min_level, hooks=hooks, clock=clock, console=console)
    )


def create_logger_from_settings(
    settings: LoggerSettings,
    *,
    hooks: Iterable[LogHook] = (),
    clock: Clock | None = None,
    console: Console | None = None,
) -> StructuredLogger:
    """Create a logger from :class:`~hooklog.config.LoggerSettings`.

    The console hook is placed first when ``settings.console`` is set,
    followed by *hooks*.
    """
    target = console or default_console
    installed: tuple[LogHook, ...] = ()
    if settings.console:
        installed = (console_hook,) if target is default_console else (ConsoleHook(target),)
    return create_logger(
        settings.name,
        min_level=settings.min_level,
        hooks=installed + tuple(hooks),
        clock=clock,
        console=target,
    )


log = create_logger("log")


__all__ = [
    "HOOK_ERROR_MSG",
    "LOGGER_ERROR_MSG",
    "LoggerConfig",
    "StructuredLogger",
    "create_logger",
    "create_logger_from_settings",
    "log",
]
