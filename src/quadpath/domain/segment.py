"""Bézier segment and elliptical arc types.

This module defines the curve primitives approximated by quadpath:
- CubicSegment: A cubic Bézier defined by four points
- QuadraticSegment: A quadratic Bézier defined by three points
- Arc: An elliptical arc in center parameterization

Splitting and decomposition live in quadpath.core.geometry; the types here only
know how to evaluate themselves.
"""

import math
from dataclasses import dataclass

from quadpath.domain.point import Point


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """A cubic Bézier segment.

    Attributes:
        from_: Start point (on curve)
        ctrl1: First control point
        ctrl2: Second control point
        to: End point (on curve)
    """

    from_: Point
    ctrl1: Point
    ctrl2: Point
    to: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        return Point(
            a * self.from_.x + b * self.ctrl1.x + c * self.ctrl2.x + d * self.to.x,
            a * self.from_.y + b * self.ctrl1.y + c * self.ctrl2.y + d * self.to.y,
        )

    def points(self) -> tuple[Point, Point, Point, Point]:
        return (self.from_, self.ctrl1, self.ctrl2, self.to)

    def to_tuple(self) -> tuple[tuple[float, float], ...]:
        """Convert to a tuple of (x, y) pairs in fontTools order."""
        return tuple(p.to_tuple() for p in self.points())


@dataclass(frozen=True, slots=True)
class QuadraticSegment:
    """A quadratic Bézier segment.

    Attributes:
        from_: Start point (on curve)
        ctrl: Control point
        to: End point (on curve)
    """

    from_: Point
    ctrl: Point
    to: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt
        b = 2.0 * mt * t
        c = t * t
        return Point(
            a * self.from_.x + b * self.ctrl.x + c * self.to.x,
            a * self.from_.y + b * self.ctrl.y + c * self.to.y,
        )

    def points(self) -> tuple[Point, Point, Point]:
        return (self.from_, self.ctrl, self.to)

    def to_tuple(self) -> tuple[tuple[float, float], ...]:
        """Convert to a tuple of (x, y) pairs in fontTools order."""
        return tuple(p.to_tuple() for p in self.points())


@dataclass(frozen=True, slots=True)
class Arc:
    """An elliptical arc in center parameterization.

    Angles are in radians. The ellipse is sampled as
    ``center + rotate(x_rotation) * (radii.x * cos(a), radii.y * sin(a))``.

    Attributes:
        center: Center of the ellipse
        radii: Radii along the (unrotated) x and y axes
        start_angle: Angle at which the arc starts
        sweep_angle: Signed angular extent of the arc
        x_rotation: Rotation of the ellipse axes
    """

    center: Point
    radii: Point
    start_angle: float
    sweep_angle: float
    x_rotation: float = 0.0

    def sample(self, angle: float) -> Point:
        """Return the point on the ellipse at the given angle."""
        return self.center + _rotate(
            Point(self.radii.x * math.cos(angle), self.radii.y * math.sin(angle)),
            self.x_rotation,
        )

    def tangent_at_angle(self, angle: float) -> Point:
        """Return the (unnormalized) tangent vector at the given angle."""
        return _rotate(
            Point(-self.radii.x * math.sin(angle), self.radii.y * math.cos(angle)),
            self.x_rotation,
        )

    def from_point(self) -> Point:
        return self.sample(self.start_angle)

    def to_point(self) -> Point:
        return self.sample(self.start_angle + self.sweep_angle)


def _rotate(v: Point, angle: float) -> Point:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(v.x * cos_a - v.y * sin_a, v.x * sin_a + v.y * cos_a)
