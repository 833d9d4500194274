from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from chartscale import InstantError, ScaleConfigError, ScaleSettings, scale_time
from chartscale.scales import TimeScale

UTC = timezone.utc


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)


def test_millisecond_precision_midpoint() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 1, 1, 0, 0, 1)], [0, 1000])

    assert scale(utc(2024, 1, 1, 0, 0, 0, 500_000)) == 500


def test_maps_calendar_year() -> None:
    start, end = utc(2024, 1, 1), utc(2024, 12, 31)
    scale = scale_time([start, end], [0, 365])

    assert scale(start) == 0
    assert scale(end) == 365
    assert 170 < scale(utc(2024, 7, 1)) < 190


def test_reversed_and_negative_range() -> None:
    start, end = utc(2024, 1, 1), utc(2024, 12, 31)

    reversed_range = scale_time([start, end], [500, 0])
    assert reversed_range(start) == 500
    assert reversed_range(end) == 0

    centered = scale_time([start, end], [-100, 100])
    assert -20 < centered(utc(2024, 7, 1)) < 20


def test_reversed_domain_flips_direction() -> None:
    scale = scale_time([utc(2024, 1, 2), utc(2024, 1, 1)], [0, 100])
    assert scale(utc(2024, 1, 2)) == 0
    assert scale(utc(2024, 1, 1)) == 100
    assert scale(utc(2024, 1, 1, 6)) == 75


def test_same_start_and_end_maps_to_range_start() -> None:
    moment = utc(2024, 1, 1)
    scale = scale_time([moment, moment], [0, 100])

    assert scale(moment) == 0
    assert scale(utc(2030, 1, 1)) == 0


def test_dates_outside_domain_extrapolate() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365])

    assert scale(utc(2023, 1, 1)) < 0
    assert scale(utc(2025, 12, 31)) > 365


@pytest.mark.parametrize(
    "start,end,mid",
    [
        (utc(1900, 1, 1), utc(2000, 1, 1), utc(1950, 1, 1)),
        (utc(2024, 1, 1), utc(2124, 1, 1), utc(2074, 1, 1)),
    ],
)
def test_distant_centuries(start: datetime, end: datetime, mid: datetime) -> None:
    scale = scale_time([start, end], [0, 1000])
    assert 400 < scale(mid) < 600


def test_small_time_range() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 1, 1, 0, 0, 0, 100_000)], [0, 100])
    assert scale(utc(2024, 1, 1, 0, 0, 0, 50_000)) == 50


def test_clamping() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365]).clamp(True)

    assert scale(utc(2023, 1, 1)) == 0
    assert scale(utc(2025, 12, 31)) == 365
    assert 0 < scale(utc(2024, 6, 1)) < 365


def test_clamping_reversed_range() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [365, 0]).clamp(True)

    assert scale(utc(2023, 1, 1)) == 365
    assert scale(utc(2025, 12, 31)) == 0


def test_clamp_toggle() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365])
    future = utc(2025, 12, 31)

    assert scale(future) > 365
    assert scale.clamp(True) is scale
    assert scale(future) == 365
    scale.clamp(False)
    assert scale(future) > 365


def test_invert_returns_new_datetime() -> None:
    start, end = utc(2024, 1, 1), utc(2024, 1, 1, 0, 0, 1)
    scale = scale_time([start, end], [0, 1000])

    inverted = scale.invert(500)
    assert isinstance(inverted, datetime)
    assert inverted == utc(2024, 1, 1, 0, 0, 0, 500_000)
    assert inverted is not start and inverted is not end
    assert scale.invert(0) == start
    assert scale.invert(1000) == end


def test_invert_reversed_range() -> None:
    start, end = utc(2024, 1, 1), utc(2024, 12, 31)
    scale = scale_time([start, end], [365, 0])

    assert scale.invert(365) == start
    assert scale.invert(0) == end


@pytest.mark.parametrize(
    "moment",
    [
        utc(2024, 6, 15),
        utc(2024, 2, 29, 13, 45, 12, 345_000),
        utc(2023, 3, 1, 7, 0, 0, 1_000),
        utc(2026, 10, 18, 23, 59, 59, 999_000),
    ],
)
def test_round_trip_within_a_millisecond(moment: datetime) -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365])

    back = scale.invert(scale(moment))
    assert abs(back - moment) <= timedelta(milliseconds=1)


def test_round_trip_ignores_clamp() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365])
    moment = utc(2026, 5, 5)
    position = scale(moment)

    scale.clamp(True)
    assert abs(scale.invert(position) - moment) <= timedelta(milliseconds=1)


def test_invert_follows_domain_timezone() -> None:
    naive = scale_time([datetime(2024, 1, 1), datetime(2024, 1, 2)], [0, 24])
    half = naive.invert(12)
    assert half.tzinfo is None
    assert half == datetime(2024, 1, 1, 12)

    tokyo = timezone(timedelta(hours=9))
    aware = scale_time(
        [datetime(2024, 1, 1, 9, tzinfo=tokyo), datetime(2024, 1, 2, 9, tzinfo=tokyo)], [0, 24]
    )
    noon = aware.invert(3)
    assert noon.utcoffset() == timedelta(hours=9)
    assert noon == datetime(2024, 1, 1, 12, tzinfo=tokyo)


def test_gantt_and_series_positions_increase() -> None:
    project = scale_time([utc(2024, 1, 1), utc(2024, 3, 31)], [0, 1000])
    x1, x2 = project(utc(2024, 1, 15)), project(utc(2024, 2, 15))
    assert x1 > 100
    assert x2 > x1

    day = scale_time([utc(2024, 1, 1), utc(2024, 1, 2)], [0, 800])
    positions = [day(utc(2024, 1, 1, h)) for h in (0, 6, 12, 18)] + [day(utc(2024, 1, 2))]
    assert positions == [0, 200, 400, 600, 800]


def test_accessors() -> None:
    start, end = utc(2024, 1, 1), utc(2024, 12, 31)
    scale = scale_time([start, end], [0, 365])

    assert scale.domain() == (start, end)
    assert scale.range() == (0, 365)
    assert isinstance(scale, TimeScale)


def test_settings_seed_clamp() -> None:
    scale = scale_time(
        [utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365], settings=ScaleSettings(clamp=True)
    )
    assert scale(utc(2030, 1, 1)) == 365


def test_non_datetime_domain_rejected() -> None:
    with pytest.raises(ScaleConfigError):
        scale_time([0, 1000], [0, 1])  # type: ignore[list-item]
    with pytest.raises(ScaleConfigError):
        scale_time([utc(2024, 1, 1)], [0, 1])


def test_non_datetime_value_rejected() -> None:
    scale = scale_time([utc(2024, 1, 1), utc(2024, 12, 31)], [0, 365])
    with pytest.raises(InstantError):
        scale(1_704_067_200_000)  # type: ignore[arg-type]
