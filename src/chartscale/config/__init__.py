"""
chartscale.config — initial scale configuration and logging setup.

## Public API
- ScaleSettings — defaults for clamp and band padding (env > TOML > defaults).
- configure_logging — render chartscale log records to stderr via structlog (console or JSON).
"""

from __future__ import annotations

from .logging import configure_logging
from .settings import ScaleSettings

__all__ = [
    "ScaleSettings",
    "configure_logging",
]
