"""
Apply scales to polars columns.

Vectorized counterparts of the scalar forward mapping, so a whole column of data
values becomes pixel coordinates in one expression.

Source of truth
- Scalar semantics live in chartscale.scales; these expressions reproduce them with
  the same floating-point operation order, so results match the scalar call.

Notes
- Linear: (x - d0) / (d1 - d0) then r0 + (r1 - r0) * t, clipped when clamped. A
  zero-width domain yields r0 for every non-null row.
- Time: Datetime columns are bridged through microsecond epoch / 1000 (milliseconds
  with a fractional part), matching chartscale.core.instants.to_epoch_ms. Naive
  columns are read as UTC.
- Band: a first-occurrence value-to-position table (domain values must be hashable);
  values outside the domain map to NaN.
- Null rows stay null for every scale kind.
"""

from __future__ import annotations

import math
from typing import Any

import polars as pl

from chartscale.core.instants import to_epoch_ms
from chartscale.core.typing import NumberPair
from chartscale.scales import BandScale, LinearScale, TimeScale

__all__ = [
    "scale_expr",
    "invert_expr",
    "with_scaled",
]


def _as_expr(column: str | pl.Expr) -> pl.Expr:
    return pl.col(column) if isinstance(column, str) else column


def _linear_expr(
    x: pl.Expr, domain: NumberPair, range_: NumberPair
) -> pl.Expr:
    d0, d1 = domain
    r0, r1 = range_
    if d1 == d0:
        t = pl.when(x.is_not_null()).then(pl.lit(0.0))
    else:
        t = (x - d0) / (d1 - d0)
    return pl.lit(r0, dtype=pl.Float64) + (r1 - r0) * t


def _clip(expr: pl.Expr, range_: NumberPair) -> pl.Expr:
    r0, r1 = range_
    return expr.clip(min(r0, r1), max(r0, r1))


def scale_expr(scale: LinearScale | TimeScale | BandScale[Any], column: str | pl.Expr) -> pl.Expr:
    """
    Build an expression applying a scale's forward mapping to a column.

    Args:
        scale: Linear, time, or band scale.
        column (str | pl.Expr): Column name or expression holding domain values.

    Returns:
        pl.Expr: Float64 expression with the mapped positions, named after ``column``
        when it is a string. Alias expression inputs yourself.

    Raises:
        TypeError: If scale is not one of the chartscale scale types.
    """
    out = _forward_expr(scale, _as_expr(column))
    return out.alias(column) if isinstance(column, str) else out


def _forward_expr(scale: LinearScale | TimeScale | BandScale[Any], x: pl.Expr) -> pl.Expr:
    if isinstance(scale, LinearScale):
        out = _linear_expr(x.cast(pl.Float64), scale.domain(), scale.range())
        return _clip(out, scale.range()) if scale.is_clamped else out

    if isinstance(scale, TimeScale):
        start, end = scale.domain()
        ms = x.dt.epoch("us") / 1000
        out = _linear_expr(ms, (to_epoch_ms(start), to_epoch_ms(end)), scale.range())
        return _clip(out, scale.range()) if scale.is_clamped else out

    if isinstance(scale, BandScale):
        positions: dict[Any, float] = {}
        for value in scale.domain():
            positions.setdefault(value, scale(value))
        if not positions:
            return pl.when(x.is_not_null()).then(pl.lit(math.nan))
        mapped = x.replace_strict(
            list(positions),
            list(positions.values()),
            default=math.nan,
            return_dtype=pl.Float64,
        )
        return pl.when(x.is_not_null()).then(mapped)

    raise TypeError(f"cannot build an expression for {type(scale).__name__}")


def invert_expr(scale: LinearScale, column: str | pl.Expr) -> pl.Expr:
    """
    Build an expression applying a linear scale's inverse to a column of positions.

    Raises:
        TypeError: If scale is not a LinearScale.
    """
    if not isinstance(scale, LinearScale):
        raise TypeError(f"invert_expr supports LinearScale, got {type(scale).__name__}")
    out = _linear_expr(_as_expr(column).cast(pl.Float64), scale.range(), scale.domain())
    return out.alias(column) if isinstance(column, str) else out


def with_scaled(
    df: pl.DataFrame,
    column: str,
    scale: LinearScale | TimeScale | BandScale[Any],
    *,
    alias: str | None = None,
) -> pl.DataFrame:
    """
    Return df with an extra column holding the scaled values of ``column``.

    Args:
        df (pl.DataFrame): Source frame (not modified).
        column (str): Column to scale.
        scale: Linear, time, or band scale.
        alias (str | None): Output column name (default "<column>_scaled").

    Returns:
        pl.DataFrame: New frame with the scaled column appended.
    """
    return df.with_columns(scale_expr(scale, column).alias(alias or f"{column}_scaled"))
