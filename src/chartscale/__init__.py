"""
chartscale — scale functions mapping data values to visual coordinates.

## Responsibilities
- Provide pure mapping objects ("scales") for charting code: linear, time, and band.
- Keep every mapping exact and side-effect free; only explicit setters mutate a scale.
- Never render, generate ticks, or infer scale types.

## Public API
- scale_linear — continuous numbers to continuous numbers (clamp, invert).
- scale_time — datetimes to continuous numbers (clamp, invert to datetime).
- scale_band — discrete values to band start positions (bandwidth, step, padding).
- ScaleSettings — initial clamp/padding configuration (env > TOML > defaults).
- configure_logging — structlog output routing for the ``chartscale`` logger.

## Integrations (import explicitly)
- chartscale.descriptors — pydantic snapshots of scale configuration.
- chartscale.frames — apply scales to polars columns.
- chartscale.vega — export scales as altair/Vega-Lite scale definitions.

## Examples
```python
from chartscale import scale_band, scale_linear

y = scale_linear((0, 100), (300, 0)).clamp(True)
x = scale_band(["A", "B", "C"], (0, 300)).padding(0.1)
bars = [(x(k), y(v), x.bandwidth()) for k, v in [("A", 40), ("B", 75), ("C", 10)]]
```
"""

from __future__ import annotations

import logging

from .config import ScaleSettings, configure_logging
from .core.errors import InstantError, ScaleConfigError, ScaleError
from .scales import (
    BandScale,
    LinearScale,
    TimeScale,
    scale_band,
    scale_linear,
    scale_time,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BandScale",
    "InstantError",
    "LinearScale",
    "ScaleConfigError",
    "ScaleError",
    "ScaleSettings",
    "TimeScale",
    "configure_logging",
    "scale_band",
    "scale_linear",
    "scale_time",
]
