"""
Band scale: discrete domain to evenly spaced bands of a numeric range.

Each domain value owns a band of width bandwidth(); consecutive band starts are
step() apart. Inner padding is the gap between adjacent bands and outer padding the
gap before the first and after the last band, both as fractions of the step.

Layout (recomputed on every call from the current domain, range, and paddings):
    step      = span / (n - padding_inner + 2 * padding_outer)
    bandwidth = step * (1 - padding_inner)
    offset    = min(range) + step * padding_outer

Notes:
    - Positions are computed in ascending orientation first. With a reversed range
      (end < start) the position is reflected as range[0] - (position - range[1]), so
      the first domain value lands at the high end.
    - A value outside the domain, or any value against an empty domain, maps to NaN.
      Test with math.isnan; no exception is raised.
    - Duplicate domain values are allowed; the first occurrence wins.

Examples:
    >>> from chartscale import scale_band
    >>> x = scale_band(["A", "B", "C"], (0, 300))
    >>> [x(v) for v in "ABC"]
    [0.0, 100.0, 200.0]
    >>> x.bandwidth(), x.step()
    (100.0, 100.0)
    >>> round(x.padding(0.2).step(), 9)
    93.75
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable
from typing import Any, Generic, NamedTuple, Self, TypeVar

from chartscale.config.settings import ScaleSettings
from chartscale.core.errors import ScaleConfigError
from chartscale.core.typing import NumberPair

from ._validate import coerce_range, coerce_real

logger = logging.getLogger(__name__)

__all__ = [
    "BandLayout",
    "BandScale",
    "scale_band",
]

T = TypeVar("T")


class BandLayout(NamedTuple):
    """Derived band geometry for one configuration snapshot."""

    step: float
    bandwidth: float
    offset: float
    reverse: bool


def _divide(numerator: float, denominator: float) -> float:
    # IEEE-style division so a zero denominator yields inf/nan instead of raising.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _build_index(values: tuple[Any, ...]) -> dict[Any, int] | None:
    index: dict[Any, int] = {}
    try:
        for i, value in enumerate(values):
            index.setdefault(value, i)
    except TypeError:
        # Unhashable domain values; fall back to sequential lookup.
        return None
    return index


class BandScale(Generic[T]):
    """
    Map discrete values to the start edge of their band.

    Attributes:
        kind (str): "band".
    """

    kind = "band"

    def __init__(
        self,
        domain: Iterable[T],
        range_: Iterable[float],
        *,
        settings: ScaleSettings | None = None,
    ) -> None:
        settings = settings or ScaleSettings()
        try:
            self._domain: tuple[T, ...] = tuple(domain)
        except TypeError as exc:
            raise ScaleConfigError(f"band domain must be iterable, got {domain!r}") from exc
        self._index = _build_index(self._domain)
        self._range: NumberPair = coerce_range(range_)
        self._padding_inner: float = settings.padding_inner
        self._padding_outer: float = settings.padding_outer
        logger.debug(
            "Created band scale: %d values range=%r padding_inner=%s padding_outer=%s",
            len(self._domain),
            self._range,
            self._padding_inner,
            self._padding_outer,
        )

    def _index_of(self, value: Any) -> int:
        if self._index is not None and isinstance(value, Hashable):
            try:
                return self._index.get(value, -1)
            except TypeError:
                # Hashable by type but not by value, e.g. a tuple holding a list.
                pass
        try:
            return self._domain.index(value)
        except ValueError:
            return -1

    def layout(self) -> BandLayout:
        """Compute step, bandwidth, offset, and orientation from the current state."""
        n = len(self._domain)
        if n == 0:
            return BandLayout(step=0.0, bandwidth=0.0, offset=0.0, reverse=False)

        start, end = self._range
        reverse = end < start
        r0, r1 = (end, start) if reverse else (start, end)

        step = _divide(r1 - r0, n - self._padding_inner + self._padding_outer * 2)
        bandwidth = step * (1 - self._padding_inner)
        offset = r0 + step * self._padding_outer
        return BandLayout(step=step, bandwidth=bandwidth, offset=offset, reverse=reverse)

    def __call__(self, value: T) -> float:
        index = self._index_of(value)
        if index == -1:
            return math.nan

        step, _, offset, reverse = self.layout()
        position = offset + index * step
        if reverse:
            return self._range[0] - (position - self._range[1])
        return position

    # Accessors

    def domain(self) -> tuple[T, ...]:
        return self._domain

    def range(self) -> NumberPair:
        return self._range

    def bandwidth(self) -> float:
        """Width of one band after inner padding; 0 for an empty domain."""
        return self.layout().bandwidth

    def step(self) -> float:
        """Distance between the starts of adjacent bands; 0 for an empty domain."""
        return self.layout().step

    @property
    def inner_padding(self) -> float:
        return self._padding_inner

    @property
    def outer_padding(self) -> float:
        return self._padding_outer

    # Configuration (chainable)

    def padding(self, value: float) -> Self:
        """Set inner and outer padding to the same value."""
        value = coerce_real(value, "padding")
        self._padding_inner = value
        self._padding_outer = value
        logger.debug("band scale padding set to %s", value)
        return self

    def padding_inner(self, value: float) -> Self:
        self._padding_inner = coerce_real(value, "padding_inner")
        logger.debug("band scale padding_inner set to %s", self._padding_inner)
        return self

    def padding_outer(self, value: float) -> Self:
        self._padding_outer = coerce_real(value, "padding_outer")
        logger.debug("band scale padding_outer set to %s", self._padding_outer)
        return self

    def __repr__(self) -> str:
        return (
            f"BandScale(domain={self._domain!r}, range={self._range!r}, "
            f"padding_inner={self._padding_inner}, padding_outer={self._padding_outer})"
        )


def scale_band(
    domain: Iterable[T],
    range_: Iterable[float],
    *,
    settings: ScaleSettings | None = None,
) -> BandScale[T]:
    """
    Create a band scale.

    Args:
        domain (Iterable[T]): Discrete values in display order. Order defines the band
            index; values only need equality comparison.
        range_ (Iterable[float]): Two numbers (start, end); may be reversed.
        settings (ScaleSettings | None): Initial paddings.

    Returns:
        BandScale[T]: Callable scale with domain, range, bandwidth, step, and padding
        setters.

    Raises:
        ScaleConfigError: If range is not a pair of real numbers.
    """
    return BandScale(domain, range_, settings=settings)
