"""Geometric operations backing the quadratic approximators.

This module provides the math the approximators are built on:
- De Casteljau splitting of cubic and quadratic segments
- Control-polygon deviation between a cubic and its best quadratic fit
- Single-quadratic fit of a cubic
- Parametric line intersection
- Elliptical arc decomposition into quadratic segments

All functions are pure and stateless.
"""

import math

from quadpath.domain import Arc, CubicSegment, Point, QuadraticSegment

# Largest angular step covered by one quadratic when decomposing an arc
ARC_STEP_ANGLE = math.pi / 4

PARALLEL_EPSILON = 1e-12


def split_cubic(cubic: CubicSegment, t: float = 0.5) -> tuple[CubicSegment, CubicSegment]:
    """Split a cubic Bézier at parameter t using De Casteljau's algorithm.

    Both halves reference the same split point, and the outer endpoints are the
    input's own points, so the halves join exactly.

    Args:
        cubic: Segment to split
        t: Split parameter in [0, 1]

    Returns:
        Tuple of (first half, second half)

    Examples:
        >>> c = CubicSegment(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
        >>> a, b = split_cubic(c)
        >>> a.to == b.from_
        True
    """
    # First level
    q0 = cubic.from_.lerp(cubic.ctrl1, t)
    q1 = cubic.ctrl1.lerp(cubic.ctrl2, t)
    q2 = cubic.ctrl2.lerp(cubic.to, t)

    # Second level
    r0 = q0.lerp(q1, t)
    r1 = q1.lerp(q2, t)

    # Third level (point on curve)
    mid = r0.lerp(r1, t)

    return (
        CubicSegment(cubic.from_, q0, r0, mid),
        CubicSegment(mid, r1, q2, cubic.to),
    )


def split_quadratic(
    quad: QuadraticSegment, t: float = 0.5
) -> tuple[QuadraticSegment, QuadraticSegment]:
    """Split a quadratic Bézier at parameter t using De Casteljau's algorithm.

    Args:
        quad: Segment to split
        t: Split parameter in [0, 1]

    Returns:
        Tuple of (first half, second half)
    """
    q0 = quad.from_.lerp(quad.ctrl, t)
    q1 = quad.ctrl.lerp(quad.to, t)
    mid = q0.lerp(q1, t)

    return (
        QuadraticSegment(quad.from_, q0, mid),
        QuadraticSegment(mid, q1, quad.to),
    )


def cubic_deviation(cubic: CubicSegment) -> tuple[Point, Point]:
    """Compute the control-point deviation vectors of a cubic.

    See Sederberg, "Computer Aided Geometric Design", § 2.6, "Distance Between
    Two Bézier Curves". Both vectors vanish exactly when the cubic is a
    degree-elevated quadratic.

    Args:
        cubic: Segment to measure

    Returns:
        Tuple of (d0, d1)
    """
    d0 = (cubic.from_ - cubic.ctrl1 * 3.0) + (cubic.ctrl2 * 3.0 - cubic.to)
    d1 = (cubic.ctrl1 * 3.0 - cubic.from_) + (cubic.to - cubic.ctrl2 * 3.0)
    return d0, d1


def cubic_error(cubic: CubicSegment) -> float:
    """Upper bound on the distance between a cubic and its quadratic fit."""
    d0, d1 = cubic_deviation(cubic)
    return max(d0.length(), d1.length()) / 6.0


def cubic_to_single_quadratic(cubic: CubicSegment) -> QuadraticSegment:
    """Fit one quadratic to a cubic, keeping the cubic's endpoints.

    Each end tangent of the cubic proposes a quadratic control point; the
    result uses their midpoint.

    Args:
        cubic: Segment to approximate

    Returns:
        Quadratic segment sharing the cubic's endpoints
    """
    p0 = (cubic.ctrl1 * 3.0 - cubic.from_) * 0.5
    p1 = (cubic.ctrl2 * 3.0 - cubic.to) * 0.5
    return QuadraticSegment(cubic.from_, p0.midpoint(p1), cubic.to)


def line_intersection(p0: Point, v0: Point, p1: Point, v1: Point) -> Point | None:
    """Intersect the lines ``p0 + s*v0`` and ``p1 + t*v1``.

    Args:
        p0: Point on the first line
        v0: Direction of the first line
        p1: Point on the second line
        v1: Direction of the second line

    Returns:
        Intersection point, or None if the lines are parallel or degenerate
    """
    det = v0.cross(v1)
    scale = v0.length() * v1.length()
    if scale == 0.0 or abs(det) <= PARALLEL_EPSILON * scale:
        return None

    s = (p1 - p0).cross(v1) / det
    return p0 + v0 * s


def arc_to_quadratics(arc: Arc) -> list[QuadraticSegment]:
    """Decompose an elliptical arc into quadratic segments.

    The sweep is clamped to a full turn and cut into equal steps of at most
    ARC_STEP_ANGLE. Each step becomes one quadratic whose endpoints lie on the
    ellipse and whose control point is the intersection of the end tangents.

    Args:
        arc: Arc to decompose

    Returns:
        Quadratic segments in the arc's direction of travel (at least one)
    """
    sign = math.copysign(1.0, arc.sweep_angle)
    sweep = min(abs(arc.sweep_angle), 2.0 * math.pi)
    if math.isnan(sweep):
        sweep = 0.0

    n_steps = max(1, math.ceil(sweep / ARC_STEP_ANGLE))
    step = sweep / n_steps * sign

    segments: list[QuadraticSegment] = []
    for i in range(n_steps):
        a1 = arc.start_angle + step * i
        a2 = arc.start_angle + step * (i + 1)

        from_ = arc.sample(a1)
        to = arc.sample(a2)
        ctrl = line_intersection(
            from_, arc.tangent_at_angle(a1), to, arc.tangent_at_angle(a2)
        )
        segments.append(QuadraticSegment(from_, ctrl if ctrl is not None else from_, to))

    return segments
