"""Time unit conversion."""

from __future__ import annotations

from typing import Dict, Literal, Optional

TimeUnit = Literal["s", "ms", "us", "ns"]

UNIT_FACTORS: Dict[str, float] = {
    "s": 1e9,
    "ms": 1e6,
    "us": 1e3,
    "ns": 1,
}


def unit_factor(unit: str) -> float:
    """Return the nanosecond divisor for ``unit``.

    Raises:
        ValueError: if ``unit`` is not one of ``s``, ``ms``, ``us``, ``ns``.
    """

    try:
        return UNIT_FACTORS[unit]
    except KeyError:
        raise ValueError(f"Unknown time unit {unit!r}; expected one of {sorted(UNIT_FACTORS)}") from None


def to_unit(value: Optional[float], unit: str) -> Optional[float]:
    if value is None:
        return None
    return value / unit_factor(unit)


__all__ = ["TimeUnit", "UNIT_FACTORS", "unit_factor", "to_unit"]
