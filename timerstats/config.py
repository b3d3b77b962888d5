"""Timer configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .clock import monotonic_ns
from .units import TimeUnit


@dataclass
class TimerConfig:
    """Defaults applied by :class:`~timerstats.timer.TimerStats`."""

    default_unit: TimeUnit = "ms"
    clock: Callable[[], int] = monotonic_ns
    total_key: str = "total"


__all__ = ["TimerConfig"]
