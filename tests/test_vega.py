from __future__ import annotations

from datetime import datetime, timezone

import altair as alt
import pytest

from chartscale import ScaleConfigError, scale_band, scale_linear, scale_time
from chartscale.vega import scale_to_dict, to_altair_scale

UTC = timezone.utc


def test_linear_scale_export() -> None:
    spec = scale_to_dict(scale_linear([0, 100], [500, 0]).clamp(True))

    assert spec["type"] == "linear"
    assert spec["domain"] == [0, 100]
    assert spec["range"] == [500, 0]
    assert spec["clamp"] is True
    assert spec["zero"] is False
    assert spec["nice"] is False


def test_time_scale_export_uses_epoch_ms() -> None:
    scale = scale_time(
        [datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 2, tzinfo=UTC)], [0, 800]
    )

    spec = scale_to_dict(scale)

    assert spec["type"] == "time"
    assert spec["domain"] == [1_704_067_200_000, 1_704_153_600_000]
    assert spec["range"] == [0, 800]
    assert spec["clamp"] is False


def test_band_scale_export_carries_paddings() -> None:
    spec = scale_to_dict(scale_band(["A", "B", "C"], [0, 300]).padding_inner(0.2).padding_outer(0.1))

    assert spec["type"] == "band"
    assert spec["domain"] == ["A", "B", "C"]
    assert spec["range"] == [0, 300]
    assert spec["paddingInner"] == 0.2
    assert spec["paddingOuter"] == 0.1
    assert spec["align"] == 0.5


def test_export_plugs_into_altair_encoding() -> None:
    x = scale_band(["A", "B"], [0, 200])
    chart = alt.Chart(alt.Data(values=[{"k": "A", "v": 1}, {"k": "B", "v": 2}])).mark_bar().encode(
        x=alt.X("k:N", scale=to_altair_scale(x)),
        y=alt.Y("v:Q", scale=to_altair_scale(scale_linear([0, 2], [100, 0]))),
    )

    encoded = chart.to_dict()["encoding"]
    assert encoded["x"]["scale"]["type"] == "band"
    assert encoded["y"]["scale"]["domain"] == [0, 2]


def test_unknown_scale_type_rejected() -> None:
    with pytest.raises(TypeError):
        to_altair_scale(object())  # type: ignore[arg-type]


def test_reversed_band_range_is_not_exported() -> None:
    scale = scale_band(["A", "B", "C"], [300, 0])
    # Vega places the ascending starts [0, 100, 200] in reverse order.
    vega_starts = [200.0, 100.0, 0.0]

    assert [scale(v) for v in "ABC"] != vega_starts
    with pytest.raises(ScaleConfigError, match="reversed range"):
        to_altair_scale(scale)


def test_zero_step_denominator_is_not_exported() -> None:
    scale = scale_band(["A"], [0, 100]).padding_inner(1)

    with pytest.raises(ScaleConfigError, match="zero step denominator"):
        scale_to_dict(scale)
