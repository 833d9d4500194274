from __future__ import annotations

import pytest

from chartscale.core.numeric import clamp_to_pair, clamp_value, interpolate, normalize


def test_normalize_fraction_of_interval() -> None:
    assert normalize(50, 0, 100) == 0.5
    assert normalize(0, 0, 100) == 0
    assert normalize(100, 0, 100) == 1
    assert normalize(150, 0, 100) == 1.5
    assert normalize(-50, 0, 100) == -0.5


def test_normalize_reversed_interval() -> None:
    assert normalize(100, 100, 0) == 0
    assert normalize(25, 100, 0) == 0.75


def test_normalize_degenerate_interval_is_exact_zero() -> None:
    assert normalize(7, 3, 3) == 0
    assert normalize(3, 3, 3) == 0
    assert normalize(-1e9, 0.0, 0.0) == 0


def test_interpolate_extrapolates_outside_unit_interval() -> None:
    assert interpolate(0, 500, 0.5) == 250
    assert interpolate(500, 0, 0.25) == 375
    assert interpolate(0, 500, 1.5) == 750
    assert interpolate(0, 500, -0.5) == -250


@pytest.mark.parametrize(
    "value,expected",
    [(-10, 0), (0, 0), (42, 42), (100, 100), (250, 100)],
)
def test_clamp_value(value: float, expected: float) -> None:
    assert clamp_value(value, 0, 100) == expected


def test_clamp_to_pair_accepts_reversed_bounds() -> None:
    assert clamp_to_pair(750, (500, 0)) == 500
    assert clamp_to_pair(-250, (500, 0)) == 0
    assert clamp_to_pair(120, (500, 0)) == 120
