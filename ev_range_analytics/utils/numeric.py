"""
Numeric helpers shared by the analytics modules.

Python's built-in round() uses banker's rounding; scores and percentages
here are rounded with halves going upward, so 2.5 -> 3 and -2.5 -> -2.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves rounded up (towards +inf)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Half-up rounding to the nearest integer."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
