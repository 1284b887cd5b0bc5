"""Domain models for quadpath.

This module contains the geometric values and path events that flow through the
approximation pipeline. All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Independent of fontTools implementation details

Key classes:
- Point: A 2D point, also used as a vector
- CubicSegment / QuadraticSegment: Bézier segments
- Arc: An elliptical arc in center parameterization
- MoveTo, LineTo, QuadraticTo, CubicTo, ArcTo, Close: Path events
"""

from quadpath.domain.events import (
    ArcTo,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    PathEvent,
    QuadraticTo,
    event_from_dict,
)
from quadpath.domain.point import Point
from quadpath.domain.segment import Arc, CubicSegment, QuadraticSegment

__all__: list[str] = [
    # Geometry
    "Point",
    "CubicSegment",
    "QuadraticSegment",
    "Arc",
    # Events
    "PathEvent",
    "MoveTo",
    "LineTo",
    "QuadraticTo",
    "CubicTo",
    "ArcTo",
    "Close",
    "event_from_dict",
]
