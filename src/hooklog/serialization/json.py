"""Serialization – cycle-safe, exception-aware JSON rendering.

:func:`stringify` walks the value depth-first once, and at every node

* replaces exceptions with :func:`~hooklog.serialization.errors.serialize_error`
  output (which is walked in turn, so causes and nested errors render too);
* omits a container already present on the current path, the same way JSON
  omits an absent value: the key disappears from a mapping and the slot
  becomes ``null`` in a sequence.

:data:`UNSET` marks an absent value.  It is dropped from mappings while
``None`` renders as ``null``::

    >>> print(stringify({"a": None, "b": UNSET}))
    {
      "a": null
    }

Errors raised while reading the value (a mapping whose ``__getitem__`` raises,
a failing ``to_dict()``) propagate to the caller.
"""
from __future__ import annotations

import dataclasses
import datetime
import json
import math
import uuid
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Final

from hooklog.serialization.errors import serialize_error


class _Unset:
    """Type of :data:`UNSET`."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()

_OMIT = object()

_INDENT = 2


def stringify(value: Any) -> str:
    """Render *value* as pretty-printed JSON (2-space indent)."""
    return json.dumps(to_jsonable(value), indent=_INDENT, ensure_ascii=False)


def to_jsonable(value: Any) -> Any:
    """Return a tree of plain dicts, lists and scalars mirroring *value*.

    The caller's objects are never modified.  An omitted root becomes ``None``.
    """
    result = _Walker().visit(value)
    return None if result is _OMIT else result


class _Walker:
    def __init__(self) -> None:
        self._path: set[int] = set()

    def visit(self, value: Any) -> Any:  # noqa: PLR0911
        if isinstance(value, BaseException):
            return self._container(value, lambda: self.visit(serialize_error(value)))

        if value is UNSET:
            return _OMIT
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, Enum):
            return self.visit(value.value)
        if isinstance(value, (str, int)):
            return value
        if isinstance(value, float):
            return value if math.isfinite(value) else None

        if isinstance(value, Mapping):
            return self._container(value, lambda: self._mapping(value.items()))
        if isinstance(value, (list, tuple)):
            return self._container(value, lambda: self._sequence(value))
        if isinstance(value, (set, frozenset)):
            return self._container(value, lambda: self._sequence(sorted(value, key=repr)))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return self._container(
                value,
                lambda: self._mapping(
                    (field.name, getattr(value, field.name))
                    for field in dataclasses.fields(value)
                ),
            )
        if callable(getattr(value, "to_dict", None)) and not isinstance(value, type):
            return self._container(value, lambda: self.visit(value.to_dict()))

        if callable(value):
            return _OMIT
        if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
            return value.isoformat()
        if isinstance(value, (uuid.UUID, Decimal, PurePath)):
            return str(value)
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)

    def _container(self, value: Any, render: Callable[[], Any]) -> Any:
        ident = id(value)
        if ident in self._path:
            return _OMIT
        self._path.add(ident)
        try:
            return render()
        finally:
            self._path.discard(ident)

    def _mapping(self, items: Iterable[tuple[Any, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, item in items:
            rendered = self.visit(item)
            if rendered is _OMIT:
                continue
            result[_key(key)] = rendered
        return result

    def _sequence(self, items: Iterable[Any]) -> list[Any]:
        result: list[Any] = []
        for item in items:
            rendered = self.visit(item)
            result.append(None if rendered is _OMIT else rendered)
        return result


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


__all__ = ["UNSET", "stringify", "to_jsonable"]
