"""Shared pytest configuration for the hooklog test suite."""

from __future__ import annotations

import json
from typing import Any

import pytest

pytest_plugins = ["hooklog.testing.fixtures"]

TS = "2024-03-25T12:00:00.000Z"


def render(record: dict[str, Any]) -> str:
    """Reference rendering: 2-space JSON, same as the logger's output."""
    return json.dumps(record, indent=2, ensure_ascii=False)


def expected_record(logger: str, msg: str, obj: dict[str, Any] | None = None, ts: str = TS) -> str:
    record: dict[str, Any] = {"logger": logger, "ts": ts, "msg": msg}
    if obj is not None:
        record["obj"] = obj
    return render(record)


@pytest.fixture
def expected() -> Any:
    """Builds the text a normal record renders to."""
    return expected_record
