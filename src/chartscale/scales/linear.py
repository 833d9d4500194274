"""
Linear scale: continuous numeric domain to continuous numeric range.

Examples:
    >>> from chartscale import scale_linear
    >>> x = scale_linear((0, 100), (0, 500))
    >>> x(50)
    250.0
    >>> x.invert(250)
    50.0
    >>> x(150)
    750.0
    >>> x.clamp(True)(150)
    500
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from chartscale.config.settings import ScaleSettings

from ._validate import coerce_real
from .continuous import ContinuousScale

__all__ = [
    "LinearScale",
    "scale_linear",
]


class LinearScale(ContinuousScale[float]):
    """
    Map numbers from a domain pair onto a range pair by straight-line interpolation.

    Out-of-domain input extrapolates unless clamping is enabled. A zero-width domain
    maps every input to range()[0].
    """

    kind = "linear"

    def _coerce_domain_value(self, value: Any) -> float:
        return coerce_real(value, "linear domain value")

    def _to_number(self, value: float) -> float:
        return value

    def _from_number(self, number: float) -> float:
        return number


def scale_linear(
    domain: Iterable[float],
    range_: Iterable[float],
    *,
    settings: ScaleSettings | None = None,
) -> LinearScale:
    """
    Create a linear scale.

    Args:
        domain (Iterable[float]): Two numbers (first, second); may be reversed.
        range_ (Iterable[float]): Two numbers (start, end); may be reversed.
        settings (ScaleSettings | None): Initial configuration (clamp flag).

    Returns:
        LinearScale: Callable scale with domain, range, clamp, and invert.

    Raises:
        ScaleConfigError: If domain or range is not a pair of real numbers.
    """
    return LinearScale(domain, range_, settings=settings)
