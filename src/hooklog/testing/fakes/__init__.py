"""Testing fakes – in-memory doubles for hooks and the clock."""
from hooklog.testing.fakes.clock import FAKE_NOW, FakeClock
from hooklog.testing.fakes.hooks import FailingHook, RecordingHook

__all__ = ["FAKE_NOW", "FailingHook", "FakeClock", "RecordingHook"]
