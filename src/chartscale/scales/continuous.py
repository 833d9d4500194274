"""
Shared behaviour of the continuous scales (linear and time).

A continuous scale maps a two-value domain onto a two-value range. Subclasses only
decide how a domain value becomes a number (_to_number) and how a number becomes a
domain value again (_from_number); normalization, interpolation, clamping, and
inversion live here.

Notes:
    - Domain and range pairs are positional (first, second), not sorted. Reversed
      pairs flip the direction of the mapping.
    - Clamping bounds the forward output to [min(range), max(range)]. It never
      touches the domain or invert.
    - invert is the inverse of the unclamped forward mapping.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, Self, TypeVar

from chartscale.config.settings import ScaleSettings
from chartscale.core.numeric import clamp_to_pair, interpolate, normalize
from chartscale.core.typing import NumberPair

from ._validate import coerce_pair, coerce_range

logger = logging.getLogger(__name__)

D = TypeVar("D")


class ContinuousScale(ABC, Generic[D]):
    """Base class for scales with a two-value continuous domain."""

    kind: ClassVar[str] = "continuous"

    def __init__(
        self,
        domain: Iterable[D],
        range_: Iterable[float],
        *,
        settings: ScaleSettings | None = None,
    ) -> None:
        d0, d1 = coerce_pair(domain, "domain")
        self._domain: tuple[D, D] = (self._coerce_domain_value(d0), self._coerce_domain_value(d1))
        self._numeric_domain = (self._to_number(self._domain[0]), self._to_number(self._domain[1]))
        self._range: NumberPair = coerce_range(range_)
        self._clamp = (settings or ScaleSettings()).clamp
        logger.debug(
            "Created %s scale: domain=%r range=%r clamp=%s",
            self.kind,
            self._domain,
            self._range,
            self._clamp,
        )

    # Hooks for subclasses

    @abstractmethod
    def _coerce_domain_value(self, value: Any) -> D:
        """Validate one domain value, raising ScaleConfigError if unusable."""

    @abstractmethod
    def _to_number(self, value: D) -> float: ...

    @abstractmethod
    def _from_number(self, number: float) -> D: ...

    # Mapping

    def __call__(self, value: D) -> float:
        d0, d1 = self._numeric_domain
        r0, r1 = self._range
        result = interpolate(r0, r1, normalize(self._to_number(value), d0, d1))
        if self._clamp:
            return clamp_to_pair(result, self._range)
        return result

    def invert(self, value: float) -> D:
        """Domain value whose unclamped image is ``value``."""
        d0, d1 = self._numeric_domain
        r0, r1 = self._range
        return self._from_number(interpolate(d0, d1, normalize(value, r0, r1)))

    # Accessors and configuration

    def domain(self) -> tuple[D, D]:
        return self._domain

    def range(self) -> NumberPair:
        return self._range

    @property
    def is_clamped(self) -> bool:
        return self._clamp

    def clamp(self, enable: bool) -> Self:
        """Enable or disable output clamping; returns the scale for chaining."""
        self._clamp = bool(enable)
        logger.debug("%s scale clamp set to %s", self.kind, self._clamp)
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self._domain!r}, range={self._range!r}, "
            f"clamp={self._clamp})"
        )
