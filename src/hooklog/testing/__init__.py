"""Testing – fakes and pytest fixtures for code that logs through hooklog."""
from hooklog.testing.fakes import FailingHook, FakeClock, RecordingHook

__all__ = ["FailingHook", "FakeClock", "RecordingHook"]
