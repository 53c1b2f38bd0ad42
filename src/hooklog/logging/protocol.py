"""Logging – hook arguments, hook type and Logger protocol."""
from __future__ import annotations

import dataclasses
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

from hooklog.logging.levels import LogLevel


@dataclasses.dataclass(frozen=True)
class LogHookArgs:
    """What every hook receives for one log call.

    A single instance is shared by all hooks of the call, so each one sees
    the same ``formatted`` text.
    """

    logger: str
    ts: str
    level: LogLevel
    msg: str
    obj: Mapping[str, Any] | None
    formatted: str


LogHook = Callable[[LogHookArgs], Awaitable[None] | None]
"""A hook may return an awaitable; :class:`StructuredLogger` never waits on it."""


class Logger(Protocol):
    """The four level methods every hooklog logger exposes."""

    def debug(self, msg: str, obj: Mapping[str, Any] | None = None) -> None: ...
    def info(self, msg: str, obj: Mapping[str, Any] | None = None) -> None: ...
    def warn(self, msg: str, obj: Mapping[str, Any] | None = None) -> None: ...
    def error(self, msg: str, obj: Mapping[str, Any] | None = None) -> None: ...


def hook_name(hook: object) -> str:
    """Name used for *hook* in ``logger_hook_error`` records (``""`` if unnamed)."""
    for attr in ("__name__", "name"):
        value = getattr(hook, attr, None)
        if isinstance(value, str):
            return value
    return ""


__all__ = ["LogHook", "LogHookArgs", "Logger", "hook_name"]
