"""
Exception types raised by scale construction and instant conversion.

Provides typed exceptions for chartscale failures:
- ScaleError as the catch-all base.
- ScaleConfigError for malformed domains, ranges, paddings, or settings.
- InstantError for values that cannot be bridged to a millisecond timestamp.

Notes:
    - Forward mappings never raise for well-formed scales. A band scale signals an
      unknown value with a NaN return, not an exception.
    - ScaleConfigError subclasses ValueError and InstantError subclasses TypeError so
      callers catching the builtin families keep working.

Examples:
    Catch a malformed range.

    >>> from chartscale import scale_linear
    >>> from chartscale.core.errors import ScaleConfigError
    >>> try:
    ...     scale_linear((0, 1), (0, 1, 2))
    ... except ScaleConfigError as e:
    ...     msg = str(e)
    >>> "two values" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "ScaleError",
    "ScaleConfigError",
    "InstantError",
]


class ScaleError(Exception):
    """Base class for chartscale errors."""


class ScaleConfigError(ScaleError, ValueError):
    """Domain, range, padding, or settings value of the wrong shape or type."""


class InstantError(ScaleError, TypeError):
    """Value is not an instant (datetime) where one is required."""
