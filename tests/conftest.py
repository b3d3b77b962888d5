from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from timerstats import TimerConfig, TimerStats


class FakeClock:
    """Clock reading a manually advanced nanosecond value."""

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timer(clock: FakeClock) -> TimerStats:
    return TimerStats(TimerConfig(clock=clock))
