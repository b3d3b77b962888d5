"""Per-operation accumulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class OperationEntry:
    """Mutable accumulation state for one operation.

    ``before`` and ``after`` are nanosecond timestamps relative to the owning
    timer's origin. ``after`` is cleared while the operation is running.
    """

    count: int = 0
    duration: int = 0
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None
    before: Optional[int] = None
    after: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.before is not None and self.after is None

    def begin(self, now: int) -> None:
        self.before = now
        self.after = None

    def record(self, before: int, after: int) -> int:
        """Apply one completed cycle and return its duration."""

        delta = after - before
        self.duration += delta
        self.count += 1
        self.min_duration = delta if self.min_duration is None else min(self.min_duration, delta)
        self.max_duration = delta if self.max_duration is None else max(self.max_duration, delta)
        self.before = before
        self.after = after
        return delta


__all__ = ["OperationEntry"]
