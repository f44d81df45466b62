"""Small numeric helpers for clamping and linear range mapping."""

from __future__ import annotations


def constrain(value, low, high):
    """Clamp value to the closed interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Map x linearly from [in_min, in_max] onto [out_min, out_max].

    Integer arithmetic with division truncated toward zero.
    """
    if in_max == in_min:
        raise ValueError("input range must not be empty")
    scaled = (x - in_min) * (out_max - out_min)
    return _div_toward_zero(scaled, in_max - in_min) + out_min