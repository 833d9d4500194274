"""
Bridging between instants (datetime) and millisecond timestamps.

Time scales do their arithmetic on milliseconds since the Unix epoch. The
conversion goes through integer timedelta arithmetic, so large calendar spans
keep microsecond detail as the fractional part of the millisecond value.

Notes:
    - Naive datetimes are interpreted as UTC.
    - from_epoch_ms always builds a new datetime. With ``like`` given, the result
      follows its timezone (naive in, naive out).
    - Sub-microsecond fractions are rounded by timedelta (round-half-even).

Examples:
    >>> from datetime import datetime, timezone
    >>> from chartscale.core.instants import to_epoch_ms, from_epoch_ms
    >>> to_epoch_ms(datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc))
    1704067200500.0
    >>> from_epoch_ms(1704067200500.0).isoformat()
    '2024-01-01T00:00:00.500000+00:00'
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .constants import EPOCH, ONE_MILLISECOND
from .errors import InstantError

__all__ = [
    "ensure_instant",
    "to_epoch_ms",
    "from_epoch_ms",
]


def ensure_instant(value: object) -> datetime:
    """
    Return value unchanged if it is a datetime.

    Raises:
        InstantError: If value is not a datetime (plain dates are rejected too).
    """
    if not isinstance(value, datetime):
        raise InstantError(f"expected a datetime instant, got {type(value).__name__}")
    return value


def to_epoch_ms(value: datetime) -> float:
    """
    Milliseconds since 1970-01-01T00:00:00Z.

    Args:
        value (datetime): Aware or naive (treated as UTC) instant.

    Returns:
        float: Millisecond timestamp; microseconds appear as the fractional part.

    Raises:
        InstantError: If value is not a datetime.
    """
    instant = ensure_instant(value)
    if instant.tzinfo is None or instant.utcoffset() is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - EPOCH) / ONE_MILLISECOND


def from_epoch_ms(ms: float, *, like: datetime | None = None) -> datetime:
    """
    Build a new datetime from a millisecond timestamp.

    Args:
        ms (float): Milliseconds since the Unix epoch.
        like (datetime | None): Template for the timezone of the result. None yields
            an aware UTC datetime; a naive template yields a naive (UTC) datetime.

    Returns:
        datetime: Newly constructed instant.
    """
    instant = EPOCH + timedelta(milliseconds=ms)
    if like is None:
        return instant
    if like.tzinfo is None or like.utcoffset() is None:
        return instant.replace(tzinfo=None)
    return instant.astimezone(like.tzinfo)
