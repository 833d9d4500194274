"""
Core contracts for chartscale (numeric helpers, instant bridging, errors, typing).

## Contracts
- numeric — normalize, interpolate, clamp_value (exact, total over finite input).
- instants — datetime <-> epoch-millisecond conversion used by time scales.
- errors — ScaleError hierarchy.
- typing — NumberPair and InstantPair aliases.
- constants — library defaults consumed by chartscale.config.

## Notes
- Zero-IO policy: stdlib only; no logging, no file access.
- Must not import chartscale.scales or any integration module.
"""

from __future__ import annotations

from .errors import InstantError, ScaleConfigError, ScaleError
from .instants import from_epoch_ms, to_epoch_ms
from .numeric import clamp_value, interpolate, normalize

__all__ = [
    "InstantError",
    "ScaleConfigError",
    "ScaleError",
    "clamp_value",
    "from_epoch_ms",
    "interpolate",
    "normalize",
    "to_epoch_ms",
]
