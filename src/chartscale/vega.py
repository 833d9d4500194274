"""
Export scales as altair (Vega-Lite) scale definitions.

Lets a chart built with chartscale positions share its exact scale configuration with
an altair chart, e.g. to draw axes over hand-positioned marks.

Notes
- Linear and time scales export with ``zero=False`` and ``nice=False``; Vega-Lite
  otherwise widens the domain, which would change the mapping.
- Time domains are exported as epoch milliseconds.
- Band scales export paddingInner/paddingOuter with ``align=0.5``, which splits the
  outer padding evenly between both ends as chartscale does.
- Two band layouts have no Vega-Lite equivalent and are refused with
  ScaleConfigError. A reversed range (end < start) reflects each band start about
  the range in chartscale, while Vega lists the ascending starts backwards, so every
  band would sit one step off its axis position. A zero denominator
  (n - padding_inner + 2 * padding_outer) gives inf or nan steps in chartscale,
  while Vega substitutes a step of 1.
"""

from __future__ import annotations

from typing import Any

import altair as alt

from chartscale.core.errors import ScaleConfigError
from chartscale.core.instants import to_epoch_ms
from chartscale.scales import BandScale, LinearScale, TimeScale

__all__ = [
    "to_altair_scale",
    "scale_to_dict",
]


def _check_band_exportable(scale: BandScale[Any]) -> None:
    start, end = scale.range()
    if end < start:
        raise ScaleConfigError(
            f"band scale with reversed range {scale.range()!r} has no altair equivalent"
        )
    n = len(scale.domain())
    if n and n - scale.inner_padding + 2 * scale.outer_padding == 0:
        raise ScaleConfigError("band scale with a zero step denominator has no altair equivalent")


def to_altair_scale(scale: LinearScale | TimeScale | BandScale[Any]) -> alt.Scale:
    """
    Translate a scale into an ``alt.Scale``.

    Args:
        scale: Linear, time, or band scale.

    Returns:
        alt.Scale: Scale definition usable in ``alt.X(..., scale=...)``.

    Raises:
        ScaleConfigError: If a band scale has a reversed range or a zero-width step
            denominator.
        TypeError: If scale is not one of the chartscale scale types.
    """
    if isinstance(scale, LinearScale):
        return alt.Scale(
            type="linear",
            domain=list(scale.domain()),
            range=list(scale.range()),
            clamp=scale.is_clamped,
            zero=False,
            nice=False,
        )
    if isinstance(scale, TimeScale):
        return alt.Scale(
            type="time",
            domain=[to_epoch_ms(d) for d in scale.domain()],
            range=list(scale.range()),
            clamp=scale.is_clamped,
            nice=False,
        )
    if isinstance(scale, BandScale):
        _check_band_exportable(scale)
        return alt.Scale(
            type="band",
            domain=list(scale.domain()),
            range=list(scale.range()),
            paddingInner=scale.inner_padding,
            paddingOuter=scale.outer_padding,
            align=0.5,
        )
    raise TypeError(f"cannot export {type(scale).__name__} to altair")


def scale_to_dict(scale: LinearScale | TimeScale | BandScale[Any]) -> dict[str, Any]:
    """Vega-Lite JSON form of :func:`to_altair_scale`."""
    return to_altair_scale(scale).to_dict()
