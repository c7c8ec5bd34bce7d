"""Rounding and clamping shared by the scorers."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 upward (2.5 -> 3, -2.5 -> -2) instead of Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
