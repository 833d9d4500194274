"""
chartscale.scales — the three scale kinds.

## Public API
- scale_linear / LinearScale — numbers to numbers, clampable, invertible.
- scale_time / TimeScale — datetimes to numbers, clampable, invertible to datetimes.
- scale_band / BandScale — discrete values to band start positions.

## Import DAG discipline
- Depends on stdlib, chartscale.core, and chartscale.config.settings.
- Must not import the integration modules (descriptors, frames, vega).
"""

from __future__ import annotations

from .band import BandLayout, BandScale, scale_band
from .continuous import ContinuousScale
from .linear import LinearScale, scale_linear
from .time import TimeScale, scale_time

__all__ = [
    "BandLayout",
    "BandScale",
    "ContinuousScale",
    "LinearScale",
    "TimeScale",
    "scale_band",
    "scale_linear",
    "scale_time",
]
