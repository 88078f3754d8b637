# src/hybrid_bar/math_utils.py

from __future__ import annotations


def clamp_i32(value: int, minimum: int, maximum: int) -> int:
    """Bound VALUE into [MINIMUM, MAXIMUM]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value
