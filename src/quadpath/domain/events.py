"""Path drawing events.

A path is described as an ordered stream of events. Curve events carry only
their control points and end point; the start point is whatever point the
previous event left the pen at.

Event kinds:
- MoveTo: Start a new subpath
- LineTo: Straight line
- QuadraticTo: Quadratic Bézier
- CubicTo: Cubic Bézier
- ArcTo: Elliptical arc
- Close: Close the current subpath
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from quadpath.domain.point import Point
from quadpath.exceptions import UnsupportedEventError


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``to``."""

    kind: ClassVar[str] = "move_to"

    to: Point

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "to": self.to.to_dict()}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Draw a straight line to ``to``."""

    kind: ClassVar[str] = "line_to"

    to: Point

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "to": self.to.to_dict()}


@dataclass(frozen=True, slots=True)
class QuadraticTo:
    """Draw a quadratic Bézier through ``ctrl`` to ``to``."""

    kind: ClassVar[str] = "quadratic_to"

    ctrl: Point
    to: Point

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "ctrl": self.ctrl.to_dict(), "to": self.to.to_dict()}


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Draw a cubic Bézier through ``ctrl1`` and ``ctrl2`` to ``to``."""

    kind: ClassVar[str] = "cubic_to"

    ctrl1: Point
    ctrl2: Point
    to: Point

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "ctrl1": self.ctrl1.to_dict(),
            "ctrl2": self.ctrl2.to_dict(),
            "to": self.to.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Draw an elliptical arc.

    Attributes:
        to: Point the arc is anchored on
        radii: Ellipse radii
        angle_from: First angle field, in radians
        angle_to: Second angle field, in radians
    """

    kind: ClassVar[str] = "arc_to"

    to: Point
    radii: Point
    angle_from: float
    angle_to: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "to": self.to.to_dict(),
            "radii": self.radii.to_dict(),
            "angle_from": self.angle_from,
            "angle_to": self.angle_to,
        }


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath."""

    kind: ClassVar[str] = "close"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


PathEvent = Union[MoveTo, LineTo, QuadraticTo, CubicTo, ArcTo, Close]


def event_from_dict(data: dict[str, Any]) -> PathEvent:
    """Deserialize an event produced by ``to_dict()``.

    Args:
        data: Dictionary with a ``kind`` field and the event's points

    Returns:
        The matching path event

    Raises:
        UnsupportedEventError: If the kind is not recognised
    """
    kind = data.get("kind")

    if kind == MoveTo.kind:
        return MoveTo(Point.from_dict(data["to"]))
    if kind == LineTo.kind:
        return LineTo(Point.from_dict(data["to"]))
    if kind == QuadraticTo.kind:
        return QuadraticTo(Point.from_dict(data["ctrl"]), Point.from_dict(data["to"]))
    if kind == CubicTo.kind:
        return CubicTo(
            Point.from_dict(data["ctrl1"]),
            Point.from_dict(data["ctrl2"]),
            Point.from_dict(data["to"]),
        )
    if kind == ArcTo.kind:
        return ArcTo(
            to=Point.from_dict(data["to"]),
            radii=Point.from_dict(data["radii"]),
            angle_from=data["angle_from"],
            angle_to=data["angle_to"],
        )
    if kind == Close.kind:
        return Close()

    raise UnsupportedEventError(str(kind), "unknown event kind")
