"""Logging – structured JSON loggers with pluggable hooks."""
from hooklog.logging.async_logger import AsyncStructuredLogger, create_async_logger
from hooklog.logging.console import Console, console
from hooklog.logging.factory import (
    HOOK_ERROR_MSG,
    LOGGER_ERROR_MSG,
    LoggerConfig,
    StructuredLogger,
    create_logger,
    create_logger_from_settings,
    log,
)
from hooklog.logging.formatting import format_failure, format_message
from hooklog.logging.hooks import ConsoleHook, StdlibLoggingHook, StructlogHook, console_hook
from hooklog.logging.levels import LogLevel
from hooklog.logging.protocol import LogHook, LogHookArgs, Logger
from hooklog.logging.structlog_factory import JsonStructlogFactory

__all__ = [
    "HOOK_ERROR_MSG",
    "LOGGER_ERROR_MSG",
    "AsyncStructuredLogger",
    "Console",
    "ConsoleHook",
    "JsonStructlogFactory",
    "LogHook",
    "LogHookArgs",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "StdlibLoggingHook",
    "StructlogHook",
    "StructuredLogger",
    "console",
    "console_hook",
    "create_async_logger",
    "create_logger",
    "create_logger_from_settings",
    "format_failure",
    "format_message",
    "log",
]
