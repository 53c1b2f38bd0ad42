"""Testing fixtures – pytest fixtures for hooklog (register via ``pytest_plugins``)."""
from hooklog.testing.fixtures.hooks import fake_clock, recording_hook

__all__ = ["fake_clock", "recording_hook"]
