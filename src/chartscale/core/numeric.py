"""
Numeric helpers shared by every scale.

normalize, interpolate, and clamp_value compose into every forward and inverse
mapping in chartscale.scales. They are exact (no epsilon handling) and total over
finite inputs. This module is zero-IO and uses only the Python standard library.

Notes:
    - normalize returns exactly 0 for a zero-width interval instead of dividing by
      zero. Degenerate domains therefore map every input to the range start.
    - interpolate does not restrict t; values outside [0, 1] extrapolate.
    - clamp_value expects lo <= hi. Callers holding a possibly reversed pair should
      use clamp_to_pair.

Examples:
    >>> from chartscale.core.numeric import normalize, interpolate, clamp_value
    >>> normalize(50, 0, 100)
    0.5
    >>> normalize(7, 3, 3)
    0
    >>> interpolate(0, 500, normalize(50, 0, 100))
    250.0
    >>> clamp_value(750, 0, 500)
    500
"""

from __future__ import annotations

from .typing import NumberPair

__all__ = [
    "normalize",
    "interpolate",
    "clamp_value",
    "clamp_to_pair",
]


def normalize(value: float, lo: float, hi: float) -> float:
    """
    Position of value within [lo, hi] as a fraction.

    Args:
        value (float): Value to locate.
        lo (float): Interval start (need not be smaller than hi).
        hi (float): Interval end.

    Returns:
        float: (value - lo) / (hi - lo), or exactly 0 when lo == hi.
    """
    if hi == lo:
        return 0
    return (value - lo) / (hi - lo)


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation a + (b - a) * t; t outside [0, 1] extrapolates."""
    return a + (b - a) * t


def clamp_value(value: float, lo: float, hi: float) -> float:
    """
    Restrict value to [lo, hi].

    Args:
        value (float): Value to restrict.
        lo (float): Lower bound; caller guarantees lo <= hi.
        hi (float): Upper bound.

    Returns:
        float: lo if value < lo, hi if value > hi, else value unchanged.
    """
    return min(max(value, lo), hi)


def clamp_to_pair(value: float, pair: NumberPair) -> float:
    """Clamp value to the bounds of a two-value pair in either order."""
    a, b = pair
    return clamp_value(value, min(a, b), max(a, b))
