"""Closeness of one scalar to an accepted interval."""

from __future__ import annotations

import math

__all__ = ["Interval", "range_score"]

Interval = tuple[float, float]

# Half the interval width is the decay length outside the bounds.
_DECAY_SCALE = 0.5


def range_score(value: float, interval: Interval) -> float:
    """Score ``value`` against the closed ``interval`` ``(min, max)``.

    Values inside the interval score ``1.0``. Outside, the score decays as
    ``exp(-distance / (width * 0.5))`` where ``distance`` is measured from the
    nearest bound.

    A zero-width interval is a point match: exactly ``1.0`` on equality and
    ``0.0`` for any deviation. NaN never matches and scores ``0.0``.
    """

    lower, upper = float(interval[0]), float(interval[1])
    value = float(value)
    if math.isnan(value):
        return 0.0
    if lower <= value <= upper:
        return 1.0

    width = upper - lower
    if width <= 0.0:
        return 0.0

    distance = lower - value if value < lower else value - upper
    normalized = distance / (width * _DECAY_SCALE)
    return max(0.0, math.exp(-normalized))
