"""
Pair aliases shared by the scales and their integrations.

This module contains no runtime logic and is zero-IO.

Notes:
    - Pairs are positional (first, second), never sorted; a reversed pair flips the
      direction of a mapping.
    - NumberPair annotates every range, and the domain of linear scales.
    - InstantPair annotates time-scale domains.

Examples:
    >>> from chartscale.core.typing import NumberPair
    >>> def span(r: NumberPair) -> float:
    ...     return abs(r[1] - r[0])
    >>> span((300.0, 0.0))
    300.0
"""

from __future__ import annotations

from datetime import datetime

__all__ = [
    "NumberPair",
    "InstantPair",
]

NumberPair = tuple[float, float]
InstantPair = tuple[datetime, datetime]
