"""Pydantic models for reported statistics."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .entry import OperationEntry
from .units import TimeUnit, to_unit, unit_factor


class OperationStats(BaseModel):
    """Snapshot of one operation, durations expressed in a single unit."""

    model_config = ConfigDict(frozen=True)

    count: int
    duration: float
    duration_avg: float
    min_duration: Optional[float] = None
    max_duration: Optional[float] = None

    @classmethod
    def from_entry(cls, entry: OperationEntry, unit: TimeUnit) -> "OperationStats":
        factor = unit_factor(unit)
        return cls(
            count=entry.count,
            duration=entry.duration / factor,
            duration_avg=entry.duration / entry.count / factor,
            min_duration=to_unit(entry.min_duration, unit),
            max_duration=to_unit(entry.max_duration, unit),
        )


__all__ = ["OperationStats"]
