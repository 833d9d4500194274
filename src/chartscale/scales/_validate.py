"""Argument coercion shared by the scale constructors."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import Any

from chartscale.core.errors import ScaleConfigError
from chartscale.core.typing import NumberPair


def is_real(value: Any) -> bool:
    """True for real numbers other than bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def coerce_real(value: Any, what: str) -> Any:
    if not is_real(value):
        raise ScaleConfigError(f"{what} must be a real number, got {value!r}")
    return value


def coerce_pair(values: Iterable[Any], what: str) -> tuple[Any, Any]:
    """Copy an iterable into a two-tuple, rejecting any other length."""
    try:
        pair = tuple(values)
    except TypeError as exc:
        raise ScaleConfigError(f"{what} must be a sequence of two values, got {values!r}") from exc
    if len(pair) != 2:
        raise ScaleConfigError(f"{what} must hold exactly two values, got {len(pair)}")
    return pair[0], pair[1]


def coerce_range(values: Iterable[Any]) -> NumberPair:
    start, end = coerce_pair(values, "range")
    return coerce_real(start, "range start"), coerce_real(end, "range end")
