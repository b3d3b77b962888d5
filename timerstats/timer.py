"""Accumulate elapsed-time statistics for named operations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from .config import TimerConfig
from .entry import OperationEntry
from .schemas import OperationStats
from .units import TimeUnit, unit_factor
from .utils.logging import logger


class TimerStats:
    """Track count, total, min and max duration per operation id.

    All timestamps are nanoseconds relative to the instance's construction.
    The instance is meant for a single owner; callers sharing it across
    threads must lock around it.

    Example::

        timer = TimerStats()
        timer.start("load")
        ...
        timer.stop("load").stop("parse", since_previous_stop=True)
        timer.stats("ms")["parse"].duration
    """

    def __init__(self, config: Optional[TimerConfig] = None):
        self.config = config or TimerConfig()
        self._clock = self.config.clock
        self.t0 = self._clock()
        self.entries: Dict[str, OperationEntry] = {}
        self._previous: Optional[OperationEntry] = None

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, op_id: object) -> bool:
        return op_id in self.entries

    def time(self) -> int:
        """Nanoseconds elapsed since this instance was created."""

        return self._clock() - self.t0

    def _entry(self, op_id: str) -> OperationEntry:
        entry = self.entries.get(op_id)
        if entry is None:
            entry = self.entries[op_id] = OperationEntry()
        return entry

    def _add_execution(self, entry: OperationEntry, after: int, since_previous_stop: bool = False) -> int:
        if since_previous_stop:
            # since the latest stop of any operation, or since creation
            previous = self._previous.after if self._previous is not None else None
            before = previous if previous is not None else 0
        elif entry.after is not None:
            # already stopped: only the gap since that stop
            before = entry.after
        elif entry.before is not None:
            before = entry.before
        else:
            before = 0
        return entry.record(before, after)

    def start(self, op_id: str) -> "TimerStats":
        now = self.time()
        self._entry(op_id).begin(now)
        logger.trace("timer start {op} at {now}ns", op=op_id, now=now)
        return self

    def stop(self, op_id: str, since_previous_stop: bool = False) -> "TimerStats":
        """Record one cycle for ``op_id``.

        Args:
            op_id: Operation identifier; created on demand.
            since_previous_stop: Measure from the most recent stop of any
                operation instead of from this operation's own start or stop.
        """

        now = self.time()
        entry = self._entry(op_id)
        delta = self._add_execution(entry, now, since_previous_stop)
        self._previous = entry
        logger.trace("timer stop {op} after {delta}ns (count={count})", op=op_id, delta=delta, count=entry.count)
        return self

    def reset(self, op_id: Optional[str] = None) -> "TimerStats":
        """Drop the stats of ``op_id``, or of every operation when omitted."""

        if op_id is not None:
            self.entries.pop(op_id, None)
            logger.debug("timer reset {op}", op=op_id)
        else:
            self.entries = {}
            logger.debug("timer reset all operations")
        return self

    def is_running(self, op_id: str) -> bool:
        entry = self.entries.get(op_id)
        return entry is not None and entry.running

    @contextmanager
    def track(self, op_id: str) -> Iterator["TimerStats"]:
        self.start(op_id)
        try:
            yield self
        finally:
            self.stop(op_id)

    def stats(self, unit: Optional[TimeUnit] = None) -> Dict[str, OperationStats]:
        """Snapshot every completed operation plus the synthetic total.

        Args:
            unit: One of ``s``, ``ms``, ``us``, ``ns``. Defaults to
                ``config.default_unit``.
        Returns:
            Mapping of operation id to :class:`OperationStats`. Operations that
            were started but never stopped are left out.
        """

        unit = unit or self.config.default_unit
        unit_factor(unit)

        total = self._entry(self.config.total_key)
        if not total.duration:
            self._add_execution(total, self.time())
            logger.debug("timer total materialized at {ns}ns", ns=total.duration)

        return {
            op_id: OperationStats.from_entry(entry, unit)
            for op_id, entry in self.entries.items()
            if entry.count
        }


__all__ = ["TimerStats"]
