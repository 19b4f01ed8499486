"""Layout module — fitting graph coordinates into a device viewport.

Stages:
  1. Bounding box   (linear scan over the raw vertex coordinates)
  2. Viewport       (normalised paint area + per-axis direction sign)
  3. Fit            (uniform scale, quantization step, centring offsets)
  4. Quantization   (forward graph → device, inverse device → graph)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Fraction of the tightest axis ratio used as the device grid step.
DELTA_DIVISOR: float = 1e6


@dataclass(frozen=True)
class Point:
    """A transformed 2D coordinate."""

    x: float
    y: float


# ─── Bounding Box ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of a set of graph coordinates."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_degenerate(self) -> bool:
        """True when all points share an x or a y coordinate."""
        return self.x_min == self.x_max or self.y_min == self.y_max


def bounding_box(coords: Iterable[tuple[float, float]]) -> BoundingBox | None:
    """Scan the coordinates once and return their bounding box.

    Returns None for an empty coordinate set.
    """
    it = iter(coords)
    first = next(it, None)
    if first is None:
        return None

    x_min = x_max = first[0]
    y_min = y_max = first[1]
    for x, y in it:
        x_min = min(x_min, x)
        x_max = max(x_max, x)
        y_min = min(y_min, y)
        y_max = max(y_max, y)

    bbox = BoundingBox(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
    logger.debug("Bounding box: %s", bbox)
    return bbox


# ─── Viewport ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Viewport:
    """A paint area with normalised ranges and a direction sign per axis.

    ``hor_min <= hor_max`` and ``ver_min <= ver_max`` always hold. A sign of -1
    records that the caller supplied that range high-to-low, which mirrors the
    rendering along that axis.
    """

    hor_min: float
    hor_max: float
    ver_min: float
    ver_max: float
    hor_sign: int = 1
    ver_sign: int = 1

    @classmethod
    def from_ranges(cls, hor_min: float, hor_max: float, ver_min: float, ver_max: float) -> Viewport:
        """Build a viewport from two possibly-inverted ranges."""
        hor_sign = 1 if hor_min <= hor_max else -1
        ver_sign = 1 if ver_min <= ver_max else -1
        return cls(
            hor_min=min(hor_min, hor_max),
            hor_max=max(hor_min, hor_max),
            ver_min=min(ver_min, ver_max),
            ver_max=max(ver_min, ver_max),
            hor_sign=hor_sign,
            ver_sign=ver_sign,
        )

    @property
    def hor_range(self) -> float:
        return self.hor_max - self.hor_min

    @property
    def ver_range(self) -> float:
        return self.ver_max - self.ver_min

    @property
    def center(self) -> Point:
        return Point(x=self.hor_min + self.hor_range / 2, y=self.ver_min + self.ver_range / 2)


# ─── Fit ──────────────────────────────────────────────────────────────────────


def snap_to_grid(value: float, origin: float, delta: float) -> float:
    """Round ``value`` to the nearest point of the grid ``origin + k * delta``.

    Ties round to the even multiple (Python's ``round``).
    """
    return round((value - origin) / delta) * delta + origin


@dataclass(frozen=True)
class Transform:
    """Fitted affine map from graph space into a viewport.

    Attributes:
        scale: Uniform graph → device scale factor.
        delta: Device grid step that forward coordinates are rounded to.
        hor_offset: Additive horizontal offset.
        ver_offset: Additive vertical offset.
        viewport: The paint area this transform was fitted for.
    """

    scale: float
    delta: float
    hor_offset: float
    ver_offset: float
    viewport: Viewport

    def forward(self, x: float, y: float) -> Point:
        """Map a graph coordinate to the device grid."""
        vp = self.viewport
        return Point(
            x=snap_to_grid(x * self.scale * vp.hor_sign - self.hor_offset, vp.hor_min, self.delta),
            y=snap_to_grid(y * self.scale * vp.ver_sign - self.ver_offset, vp.ver_min, self.delta),
        )

    def inverse(self, px: float, py: float) -> Point:
        """Map a device coordinate back to graph space.

        Undoes the unrounded forward map; a round trip is exact up to the
        rounding of the forward step.
        """
        vp = self.viewport
        return Point(
            x=(px + self.hor_offset) / self.scale * vp.hor_sign,
            y=(py + self.ver_offset) / self.scale * vp.ver_sign,
        )


def fit_viewport(bbox: BoundingBox, viewport: Viewport) -> Transform:
    """Fit ``bbox`` into ``viewport`` with one delta of margin, centred.

    A box that is flat along one axis picks its delta from the other axis
    through the opposite viewport dimension; a single point is fitted as the
    unit box centred on it so that delta and scale stay finite and positive.

    A viewport axis of zero extent contributes no ratio to delta and scales to
    zero, so the scale falls back to delta and that axis collapses onto its
    minimum.
    """
    hor_rng = viewport.hor_range
    ver_rng = viewport.ver_range

    if bbox.width == 0 and bbox.height == 0:
        bbox = BoundingBox(
            x_min=bbox.x_min - 0.5,
            x_max=bbox.x_max + 0.5,
            y_min=bbox.y_min - 0.5,
            y_max=bbox.y_max + 0.5,
        )

    if bbox.is_degenerate:
        pairs, pick = ((bbox.width, ver_rng), (bbox.height, hor_rng)), max
    else:
        pairs, pick = ((bbox.width, hor_rng), (bbox.height, ver_rng)), min
    ratios = [span / rng for span, rng in pairs if span > 0 and rng > 0]
    if ratios:
        delta = pick(ratios) / DELTA_DIVISOR
    else:
        # Both viewport axes are empty: measure the box against a unit area.
        delta = max(bbox.width, bbox.height) / DELTA_DIVISOR

    scale = max(delta, min(hor_rng / (bbox.width + delta), ver_rng / (bbox.height + delta)))

    hor_sign = viewport.hor_sign
    ver_sign = viewport.ver_sign
    hor_offset = (bbox.x_min + bbox.x_max + delta * hor_sign) / 2 * scale * hor_sign - hor_rng / 2 - viewport.hor_min
    ver_offset = (bbox.y_min + bbox.y_max + delta * ver_sign) / 2 * scale * ver_sign - ver_rng / 2 - viewport.ver_min

    transform = Transform(
        scale=scale,
        delta=delta,
        hor_offset=hor_offset,
        ver_offset=ver_offset,
        viewport=viewport,
    )
    logger.debug("Fitted %s into %s: scale=%g delta=%g", bbox, viewport, scale, delta)
    return transform


def transform_points(coords: Iterable[tuple[float, float]], transform: Transform) -> list[Point]:
    """Apply the forward map to every coordinate, preserving order."""
    return [transform.forward(x, y) for x, y in coords]
