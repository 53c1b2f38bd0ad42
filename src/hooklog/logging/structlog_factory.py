"""Logging – JsonStructlogFactory."""
from __future__ import annotations

import logging
from typing import Any, TextIO

import structlog


class JsonStructlogFactory:
    """Configure structlog + stdlib :mod:`logging` for JSON output.

    Pair with :class:`~hooklog.logging.hooks.StructlogHook` or
    :class:`~hooklog.logging.hooks.StdlibLoggingHook` so hooklog records
    flow through an application's existing logging setup as JSON lines.
    """

    @staticmethod
    def configure(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
        """Install a JSON-rendering handler on the root logger and return it."""
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors + [structlog.stdlib.ExtraAdder(allow=["hooklog"])],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        return handler


__all__ = ["JsonStructlogFactory"]
