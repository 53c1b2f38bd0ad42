"""
hooklog – structured JSON logging with pluggable hooks.

Import path convention::

    from hooklog import create_logger, log
    from hooklog.logging import LogHookArgs, LogLevel, StdlibLoggingHook
    from hooklog.serialization import serialize_error, stringify
    from hooklog.config import EnvSettingsLoader, LoggerSettings
"""

from hooklog.logging import (
    AsyncStructuredLogger,
    LogHook,
    LogHookArgs,
    LogLevel,
    StructuredLogger,
    console_hook,
    create_async_logger,
    create_logger,
    create_logger_from_settings,
    log,
)
from hooklog.serialization import UNSET, SerializedError, serialize_error, stringify

__version__ = "0.1.0"
__all__ = [
    "UNSET",
    "AsyncStructuredLogger",
    "LogHook",
    "LogHookArgs",
    "LogLevel",
    "SerializedError",
    "StructuredLogger",
    "__version__",
    "console_hook",
    "create_async_logger",
    "create_logger",
    "create_logger_from_settings",
    "log",
    "serialize_error",
    "stringify",
]
