"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from hooklog.kernel.time import FrozenClock

FAKE_NOW = datetime(2024, 3, 25, 12, 0, tzinfo=UTC)


def FakeClock() -> FrozenClock:  # noqa: N802
    """Return a ``FrozenClock`` pinned to 2024-03-25 12:00 UTC."""
    return FrozenClock(FAKE_NOW)


__all__ = ["FAKE_NOW", "FakeClock"]
