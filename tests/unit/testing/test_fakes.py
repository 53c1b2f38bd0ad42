"""Unit tests for hooklog.testing fakes and fixtures."""

from __future__ import annotations

import pytest

from hooklog import LogLevel, create_logger
from hooklog.kernel.time import FrozenClock
from hooklog.testing import FailingHook, FakeClock, RecordingHook
from hooklog.testing.fakes import FAKE_NOW


class TestRecordingHook:
    def test_records_calls(self) -> None:
        hook = RecordingHook()
        logger = create_logger("x", hooks=[hook])
        logger.info("a")
        logger.error("b")
        assert hook.messages == ["a", "b"]
        assert [c.msg for c in hook.at_level("error")] == ["b"]
        assert len(hook.formatted) == 2

    def test_clear(self) -> None:
        hook = RecordingHook()
        create_logger("x", hooks=[hook]).info("a")
        hook.clear()
        assert hook.calls == []

    def test_fixture_is_fresh(self, recording_hook: RecordingHook) -> None:
        assert recording_hook.calls == []
        assert recording_hook.name == "recording_hook"


class TestFailingHook:
    def test_raises_configured_error(self) -> None:
        error = ValueError("nope")
        hook = FailingHook(error)
        with pytest.raises(ValueError):
            hook(None)  # type: ignore[arg-type]
        assert hook.attempts == 1

    def test_default_error(self) -> None:
        hook = FailingHook()
        with pytest.raises(RuntimeError, match="hook failed"):
            hook(None)  # type: ignore[arg-type]


class TestFakeClock:
    def test_pinned(self) -> None:
        assert FakeClock().now() == FAKE_NOW

    def test_fixture(self, fake_clock: FrozenClock) -> None:
        assert fake_clock.now() == FAKE_NOW
        hook = RecordingHook()
        create_logger("x", hooks=[hook], clock=fake_clock).warn("m")
        assert hook.calls[0].ts == "2024-03-25T12:00:00.000Z"
        assert hook.calls[0].level is LogLevel.WARN
