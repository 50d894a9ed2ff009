"""
Numeric helpers used by every scorer.

Scores are rounded half-up so that 72.5 always becomes 73, independent of
Python's banker's rounding.
"""

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value between low and high"""
    return min(max(value, low), high)


def map_range(value: float, in_min: float, in_max: float,
              out_min: float, out_max: float) -> float:
    """Linearly map value from [in_min, in_max] onto [out_min, out_max]"""
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence"""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
