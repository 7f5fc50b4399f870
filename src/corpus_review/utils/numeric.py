"""Rounding helpers.

Scores and percentages round half away from zero (12.5 -> 13), not to even
as the built-in `round` does, so published percentages stay stable.
"""

from __future__ import annotations
import math


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def percent(part: float, whole: float) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100
