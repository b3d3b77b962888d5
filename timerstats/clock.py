"""Monotonic time source."""

from __future__ import annotations

import time


def monotonic_ns() -> int:
    """Nanoseconds since an arbitrary but fixed epoch."""

    return time.monotonic_ns()


__all__ = ["monotonic_ns"]
