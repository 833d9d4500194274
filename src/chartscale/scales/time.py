"""
Time scale: continuous domain of instants to continuous numeric range.

Instants are datetime objects. Arithmetic happens on milliseconds since the Unix
epoch (see chartscale.core.instants); invert builds a fresh datetime in the timezone
of the first domain instant.

Examples:
    >>> from datetime import datetime, timezone
    >>> from chartscale import scale_time
    >>> start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    >>> end = datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
    >>> t = scale_time((start, end), (0, 1000))
    >>> t(datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc))
    500.0
    >>> t.invert(250).isoformat()
    '2024-01-01T00:00:00.250000+00:00'
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from chartscale.config.settings import ScaleSettings
from chartscale.core.errors import InstantError, ScaleConfigError
from chartscale.core.instants import ensure_instant, from_epoch_ms, to_epoch_ms

from .continuous import ContinuousScale

__all__ = [
    "TimeScale",
    "scale_time",
]


class TimeScale(ContinuousScale[datetime]):
    """Linear mapping from a pair of instants onto a numeric range."""

    kind = "time"

    def _coerce_domain_value(self, value: Any) -> datetime:
        try:
            return ensure_instant(value)
        except InstantError as exc:
            raise ScaleConfigError(f"time domain value must be a datetime, got {value!r}") from exc

    def _to_number(self, value: datetime) -> float:
        return to_epoch_ms(value)

    def _from_number(self, number: float) -> datetime:
        return from_epoch_ms(number, like=self._domain[0])


def scale_time(
    domain: Iterable[datetime],
    range_: Iterable[float],
    *,
    settings: ScaleSettings | None = None,
) -> TimeScale:
    """
    Create a time scale.

    Args:
        domain (Iterable[datetime]): Two instants (first, second); may be reversed.
            Naive datetimes are read as UTC.
        range_ (Iterable[float]): Two numbers (start, end); may be reversed.
        settings (ScaleSettings | None): Initial configuration (clamp flag).

    Returns:
        TimeScale: Callable scale with domain, range, clamp, and invert.

    Raises:
        ScaleConfigError: If domain is not a pair of datetimes or range is not a pair
            of real numbers.
    """
    return TimeScale(domain, range_, settings=settings)
