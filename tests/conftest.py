"""Pytest configuration and shared fixtures."""
from datetime import datetime, timedelta

import pytest

from chatreaction.config import ChatSettings
from chatreaction.conversation import ChatSession, ManualScheduler, MessageStore


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    """Return a fake clock fixed at a known time."""
    return FakeClock(datetime(2025, 3, 10, 12, 0, 0))


@pytest.fixture
def scheduler():
    """Return a virtual-clock scheduler."""
    return ManualScheduler()


@pytest.fixture
def store():
    """Return an empty message store."""
    return MessageStore()


@pytest.fixture
def settings():
    """Return settings with a fixed random seed."""
    return ChatSettings(random_seed=7)


@pytest.fixture
def session(scheduler, settings, clock):
    """Return an inactive session without the seed conversation."""
    return ChatSession(scheduler, settings, clock=clock, seed_conversation=False)


@pytest.fixture
def seeded_session(scheduler, settings, clock):
    """Return an inactive session that seeds the mock conversation on activation."""
    return ChatSession(scheduler, settings, clock=clock)


@pytest.fixture
def debug_log():
    """Collect (level, component, message) tuples from a debug callback."""
    entries: list[tuple[str, str, str]] = []

    def _callback(level: str, component: str, message: str) -> None:
        entries.append((level, component, message))

    _callback.entries = entries
    return _callback
