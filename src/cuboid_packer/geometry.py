"""Geometry utilities for the packing engine."""

from __future__ import annotations

from dataclasses import dataclass

Bounds = tuple[float, float, float, float, float, float]

# Relative slack for containment checks; split arithmetic on floats can
# land a hair past a bin wall.
TOLERANCE = 1e-9


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at (x, y). Used for shelf footprints."""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Cuboid:
    """Axis-aligned cuboid anchored at (x, y, z); y is the vertical axis."""

    x: float
    y: float
    z: float
    width: float
    height: float
    depth: float

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0 or self.depth <= 0

    def bounds(self) -> Bounds:
        return (
            self.x,
            self.y,
            self.z,
            self.x + self.width,
            self.y + self.height,
            self.z + self.depth,
        )


def slack(limit: float) -> float:
    return TOLERANCE * max(1.0, abs(limit))


def exceeds(value: float, limit: float) -> bool:
    """True if value is past limit by more than float round-off."""
    return value > limit + slack(limit)


def is_negative(value: float) -> bool:
    return value < -TOLERANCE


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Overlap exists only if they overlap on ALL 3 axes with positive volume.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (
        ax1 < bx2 - slack(bx2) and bx1 < ax2 - slack(ax2)
        and ay1 < by2 - slack(by2) and by1 < ay2 - slack(ay2)
        and az1 < bz2 - slack(bz2) and bz1 < az2 - slack(az2)
    )


def within(bounds: Bounds, width: float, height: float, depth: float) -> bool:
    """True if bounds lie inside [0, width] x [0, height] x [0, depth]."""
    x1, y1, z1, x2, y2, z2 = bounds
    if is_negative(x1) or is_negative(y1) or is_negative(z1):
        return False
    return not (exceeds(x2, width) or exceeds(y2, height) or exceeds(z2, depth))
