"""
Library-wide defaults for chartscale.

Defines the initial configuration values consumed by scale constructors and by
chartscale.config.ScaleSettings. This module is zero-IO and uses only the Python
standard library.

Notes:
    - ScaleSettings reads its field defaults from here; change defaults in this
      module rather than in the settings class.
    - Instants are bridged to numbers through milliseconds since the Unix epoch.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

__all__ = [
    "DEFAULT_CLAMP",
    "DEFAULT_PADDING_INNER",
    "DEFAULT_PADDING_OUTER",
    "EPOCH",
    "ONE_MILLISECOND",
    "SETTINGS_ENV_PREFIX",
]

# Continuous scales start unclamped (out-of-domain input extrapolates).
DEFAULT_CLAMP: bool = False

# Band scales start with no gap between or around bands.
DEFAULT_PADDING_INNER: float = 0.0
DEFAULT_PADDING_OUTER: float = 0.0

# Reference instant for millisecond timestamps (aware, UTC).
EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND: timedelta = timedelta(milliseconds=1)

# Environment variable prefix recognized by ScaleSettings.from_env.
SETTINGS_ENV_PREFIX: str = "CHARTSCALE_"
