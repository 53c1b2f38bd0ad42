"""Logging – record formatting.

Normal records render as ``logger, ts, msg, obj``; the diagnostics the logger
emits about its own failures render as ``ts, msg, err, obj`` and carry no
``logger`` field.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hooklog.serialization import UNSET, SerializedError, stringify


def format_message(
    logger: str,
    ts: str,
    msg: str,
    obj: Mapping[str, Any] | None = None,
) -> str:
    """Render one log record; without a payload the ``obj`` key is left out."""
    return stringify({
        "logger": logger,
        "ts": ts,
        "msg": msg,
        "obj": UNSET if obj is None else obj,
    })


def format_failure(ts: str, msg: str, err: SerializedError, obj: Mapping[str, Any]) -> str:
    return stringify({"ts": ts, "msg": msg, "err": err, "obj": obj})


__all__ = ["format_failure", "format_message"]
