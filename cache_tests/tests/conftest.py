import types

import pytest

import storage.memory_storage as storage_mod


class FakeClock:
    """Monotonic clock stand-in; `now` is in seconds like time.monotonic."""

    def __init__(self) -> None:
        self.now = 0.0

    def monotonic(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    c = FakeClock()
    # Only the storage module sees the fake clock; the event loop keeps real time.
    monkeypatch.setattr(storage_mod, "time", types.SimpleNamespace(monotonic=c.monotonic))
    return c
