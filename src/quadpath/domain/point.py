"""2D point type shared by points and vectors."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable. Arithmetic operators treat the point as a vector
    from the origin, so the same type serves positions, offsets and radii.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Point":
        """Return the origin."""
        return cls(0.0, 0.0)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Point":
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> "Point":
        return Point(self.x / scale, self.y / scale)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def cross(self, other: "Point") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation towards other (t=0 is self, t=1 is other)."""
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def angle_from_x_axis(self) -> float:
        """Angle of the vector in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Point":
        """Build a point from an (x, y) pair as used by fontTools pens."""
        x, y = pt
        return cls(float(x), float(y))
