"""
Configuration for chartscale scale constructors.

Defines ScaleSettings, a frozen dataclass carrying the initial configuration applied
by scale_linear, scale_time, and scale_band. Defaults are sourced from
chartscale.core.constants (the single source of truth).

Source of truth
- chartscale.core.constants.DEFAULT_CLAMP, DEFAULT_PADDING_INNER, DEFAULT_PADDING_OUTER

Import DAG discipline
- Depends only on stdlib and chartscale.core.
- Does not import chartscale.scales or the integration modules.

Notes
- Settings only seed a scale's initial state. Setter calls on the scale (clamp,
  padding, padding_inner, padding_outer) still override afterwards.
- Constructors never read the environment implicitly; callers opt in with
  ScaleSettings.load() and pass the result as ``settings=``.
"""

from __future__ import annotations

import logging
import math
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from chartscale.core.constants import (
    DEFAULT_CLAMP,
    DEFAULT_PADDING_INNER,
    DEFAULT_PADDING_OUTER,
    SETTINGS_ENV_PREFIX,
)
from chartscale.core.errors import ScaleConfigError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_STRINGS = {"0", "false", "f", "no", "n", "off"}


def _parse_bool(v: Any) -> bool | None:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        lo = v.strip().lower()
        if lo in _TRUE_STRINGS:
            return True
        if lo in _FALSE_STRINGS:
            return False
    return None


def _parse_float(v: Any) -> float | None:
    if isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    # Non-finite values are treated as unparseable.
    return f if math.isfinite(f) else None


@dataclass(frozen=True)
class ScaleSettings:
    """
    Initial configuration for newly constructed scales.

    Attributes:
        clamp (bool): Initial clamp flag for linear and time scales.
        padding_inner (float): Initial inner padding for band scales.
        padding_outer (float): Initial outer padding for band scales.

    Raises:
        ScaleConfigError: If a padding is negative or not finite.

    Examples:
        >>> from chartscale.config import ScaleSettings
        >>> ScaleSettings(padding_inner=0.1)
        ScaleSettings(clamp=False, padding_inner=0.1, padding_outer=0.0)
    """

    clamp: bool = DEFAULT_CLAMP
    padding_inner: float = DEFAULT_PADDING_INNER
    padding_outer: float = DEFAULT_PADDING_OUTER

    def __post_init__(self) -> None:
        if not isinstance(self.clamp, bool):
            raise ScaleConfigError(f"ScaleSettings clamp must be a bool, got {self.clamp!r}")
        for name in ("padding_inner", "padding_outer"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ScaleConfigError(f"ScaleSettings {name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise ScaleConfigError(
                    f"ScaleSettings {name} must be finite and >= 0, got {value!r}"
                )

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ScaleSettings, cfg: dict[str, Any] | None) -> ScaleSettings:
        """Apply a loose config mapping onto ScaleSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "clamp" in cfg:
            clamp = _parse_bool(cfg["clamp"])
            if clamp is not None:
                s = replace(s, clamp=clamp)

        # A shared "padding" key seeds both sides; the specific keys win.
        if "padding" in cfg:
            padding = _parse_float(cfg["padding"])
            if padding is not None:
                s = replace(s, padding_inner=padding, padding_outer=padding)

        for name in ("padding_inner", "padding_outer"):
            if name in cfg:
                value = _parse_float(cfg[name])
                if value is not None:
                    s = replace(s, **{name: value})

        return s

    @classmethod
    def from_env(
        cls, base: ScaleSettings | None = None, prefix: str = SETTINGS_ENV_PREFIX
    ) -> ScaleSettings:
        """
        Build ScaleSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - CHARTSCALE_CLAMP (1/0/true/false/yes/no/on/off)
            - CHARTSCALE_PADDING (sets both paddings)
            - CHARTSCALE_PADDING_INNER
            - CHARTSCALE_PADDING_OUTER

        Unparseable and non-finite values are ignored. A negative padding raises
        ScaleConfigError.
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("CLAMP", "PADDING", "PADDING_INNER", "PADDING_OUTER"):
            v = os.getenv(prefix + key)
            if v:
                mapping[key.lower()] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ScaleSettings:
        """
        Build ScaleSettings from a TOML file.

        Search order when `path` is None:
            1) ./chartscale.toml (with either a [scales] table or top-level keys)
            2) ./pyproject.toml under [tool.chartscale]

        Returns defaults if no file is present or none of them carries settings.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Unreadable settings file %s: %s", p, exc)
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "chartscale.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("chartscale") if isinstance(tool, dict) else None
            elif isinstance(data.get("scales"), dict):
                cfg = data["scales"]
            else:
                cfg = data
            if cfg:
                logger.debug("Loaded scale settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ScaleSettings:
        """
        Load ScaleSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (chartscale.toml, pyproject.toml).

        Returns:
            ScaleSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        logger.debug(
            "Scale settings: clamp=%s padding_inner=%s padding_outer=%s",
            s.clamp,
            s.padding_inner,
            s.padding_outer,
        )
        return s
