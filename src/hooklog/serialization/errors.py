"""Serialization – exception normalizer.

Converts any caught value into a plain, JSON-safe mapping::

    >>> serialize_error("oops")
    {'name': 'NonError', 'message': 'oops'}

Exceptions keep their class name, message and formatted traceback, followed
by their public instance attributes (``code``, ``status`` …).  ``name``,
``message`` and ``stack`` are set first and never overwritten.  Chained causes
(a ``cause`` attribute, else ``raise ... from``) are normalized recursively;
a cause already seen further up the chain is dropped, so cyclic chains end.

The normalizer runs inside failure paths, so it never raises.
"""
from __future__ import annotations

import traceback
from typing import Any

SerializedError = dict[str, Any]

NON_ERROR = "NonError"


def serialize_error(err: object) -> SerializedError:
    """Return the JSON-safe form of *err*."""
    return _serialize(err, set())


def _serialize(err: object, chain: set[int]) -> SerializedError:
    if not isinstance(err, BaseException):
        return {"name": NON_ERROR, "message": _safe_str(err)}

    chain.add(id(err))
    serialized: SerializedError = {
        "name": type(err).__name__,
        "message": _safe_str(err),
    }
    stack = _format_stack(err)
    if stack is not None:
        serialized["stack"] = stack

    for key, value in _public_attributes(err):
        if key in serialized or key == "cause":
            continue
        serialized[key] = value

    cause = _cause_of(err)
    if cause is not None:
        if isinstance(cause, BaseException):
            if id(cause) not in chain:
                serialized["cause"] = _serialize(cause, chain)
        else:
            serialized["cause"] = cause
    return serialized


def _cause_of(err: BaseException) -> object:
    try:
        cause = getattr(err, "cause", None)
    except Exception:  # noqa: BLE001
        cause = None
    if cause is None:
        cause = err.__cause__
    return cause


def _public_attributes(err: BaseException) -> list[tuple[str, Any]]:
    try:
        attributes = vars(err)
    except TypeError:
        return []
    return [(key, value) for key, value in attributes.items() if not key.startswith("_")]


def _format_stack(err: BaseException) -> str | None:
    try:
        return "".join(
            traceback.format_exception(type(err), err, err.__traceback__, chain=False)
        ).rstrip("\n")
    except Exception:  # noqa: BLE001
        return None


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__} object>"


__all__ = ["NON_ERROR", "SerializedError", "serialize_error"]
