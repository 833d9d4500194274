"""
Serializable descriptors of scale configuration.

A descriptor is a validated, frozen pydantic snapshot of everything needed to rebuild
a scale: its kind, domain, range, and clamp flag or paddings. Descriptors let chart
configuration travel as JSON next to the data it draws.

Contracts
- describe(scale) captures the current configuration of a scale.
- descriptor.build() (or build_scale) creates a new, independent scale whose mapping
  equals the described one.
- ScaleDescriptor is a discriminated union on ``kind``; parse_descriptor accepts a
  mapping or a JSON string.
- descriptor_fingerprint hashes the canonical JSON form (sorted keys, compact
  separators) so identical configurations share a fingerprint.

Notes
- Validation failures surface as pydantic.ValidationError.
- Band domains must be JSON-serializable to be dumped; they are stored as a list.

Examples:
    >>> from chartscale import scale_band
    >>> from chartscale.descriptors import describe, parse_descriptor
    >>> d = describe(scale_band(["A", "B"], (0, 200)).padding_outer(1.0))
    >>> d.kind, d.padding_outer
    ('band', 1.0)
    >>> parse_descriptor(d.model_dump_json()).build()("B")
    100.0
"""

from __future__ import annotations

import hashlib
import json
import math
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from chartscale.core.typing import InstantPair, NumberPair
from chartscale.scales import BandScale, LinearScale, TimeScale

__all__ = [
    "LinearScaleDescriptor",
    "TimeScaleDescriptor",
    "BandScaleDescriptor",
    "ScaleDescriptor",
    "describe",
    "build_scale",
    "parse_descriptor",
    "descriptor_fingerprint",
]


def _check_finite_pair(v: NumberPair) -> NumberPair:
    if not all(math.isfinite(x) for x in v):
        raise ValueError(f"values must be finite, got {v!r}")
    return v


class _DescriptorBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    range: NumberPair

    @field_validator("range")
    @classmethod
    def _range_finite(cls, v: NumberPair) -> NumberPair:
        return _check_finite_pair(v)


class LinearScaleDescriptor(_DescriptorBase):
    """
    Snapshot of a linear scale.

    Attributes:
        kind (Literal["linear"]): Discriminator.
        domain (NumberPair): Domain pair, positional.
        range (NumberPair): Range pair, positional.
        clamp (bool): Clamp flag.
    """

    kind: Literal["linear"] = "linear"
    domain: NumberPair
    clamp: bool = False

    @field_validator("domain")
    @classmethod
    def _domain_finite(cls, v: NumberPair) -> NumberPair:
        return _check_finite_pair(v)

    def build(self) -> LinearScale:
        return LinearScale(self.domain, self.range).clamp(self.clamp)


class TimeScaleDescriptor(_DescriptorBase):
    """
    Snapshot of a time scale.

    Attributes:
        kind (Literal["time"]): Discriminator.
        domain (InstantPair): Domain instants; ISO 8601 in JSON.
        range (NumberPair): Range pair, positional.
        clamp (bool): Clamp flag.
    """

    kind: Literal["time"] = "time"
    domain: InstantPair
    clamp: bool = False

    def build(self) -> TimeScale:
        return TimeScale(self.domain, self.range).clamp(self.clamp)


class BandScaleDescriptor(_DescriptorBase):
    """
    Snapshot of a band scale.

    Attributes:
        kind (Literal["band"]): Discriminator.
        domain (list[Any]): Discrete values in band order.
        range (NumberPair): Range pair, positional.
        padding_inner (float): Inner padding fraction.
        padding_outer (float): Outer padding fraction.
    """

    kind: Literal["band"] = "band"
    domain: list[Any] = Field(default_factory=list)
    padding_inner: float = 0.0
    padding_outer: float = 0.0

    @field_validator("padding_inner", "padding_outer")
    @classmethod
    def _padding_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"padding must be finite, got {v!r}")
        return v

    def build(self) -> BandScale[Any]:
        return (
            BandScale(self.domain, self.range)
            .padding_inner(self.padding_inner)
            .padding_outer(self.padding_outer)
        )


ScaleDescriptor = Annotated[
    LinearScaleDescriptor | TimeScaleDescriptor | BandScaleDescriptor,
    Field(discriminator="kind"),
]

_DESCRIPTOR_ADAPTER: TypeAdapter[ScaleDescriptor] = TypeAdapter(ScaleDescriptor)


def describe(scale: LinearScale | TimeScale | BandScale[Any]) -> ScaleDescriptor:
    """
    Capture the current configuration of a scale.

    Raises:
        TypeError: If scale is not one of the chartscale scale types.
    """
    if isinstance(scale, LinearScale):
        return LinearScaleDescriptor(
            domain=scale.domain(), range=scale.range(), clamp=scale.is_clamped
        )
    if isinstance(scale, TimeScale):
        return TimeScaleDescriptor(
            domain=scale.domain(), range=scale.range(), clamp=scale.is_clamped
        )
    if isinstance(scale, BandScale):
        return BandScaleDescriptor(
            domain=list(scale.domain()),
            range=scale.range(),
            padding_inner=scale.inner_padding,
            padding_outer=scale.outer_padding,
        )
    raise TypeError(f"cannot describe {type(scale).__name__}")


def build_scale(descriptor: ScaleDescriptor) -> LinearScale | TimeScale | BandScale[Any]:
    """Create a new scale from a descriptor."""
    return descriptor.build()


def parse_descriptor(data: Mapping[str, Any] | str | bytes) -> ScaleDescriptor:
    """
    Validate a mapping or JSON document into the matching descriptor type.

    Raises:
        pydantic.ValidationError: If the payload does not describe a scale.
    """
    if isinstance(data, (str, bytes)):
        return _DESCRIPTOR_ADAPTER.validate_json(data)
    return _DESCRIPTOR_ADAPTER.validate_python(dict(data))


def descriptor_fingerprint(descriptor: ScaleDescriptor) -> str:
    """SHA-256 hex digest over the canonical JSON form of a descriptor."""
    payload = json.dumps(
        descriptor.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
