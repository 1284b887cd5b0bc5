"""Converters between fontTools pen commands and path events.

This module handles the conversion between fontTools' pen protocol, as
captured by a RecordingPen, and the domain path events.
"""

from collections.abc import Iterable
from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment

from quadpath.domain import (
    ArcTo,
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    PathEvent,
    Point,
    QuadraticTo,
)
from quadpath.exceptions import PathConversionError, UnsupportedEventError


def recording_to_events(recording: Iterable[tuple[str, tuple[Any, ...]]]) -> list[PathEvent]:
    """Convert RecordingPen recording to a list of path events.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic spline
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3), ...))  # Cubic (super-)Bezier
    - ('closePath', ())
    - ('endPath', ())

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of path events

    Raises:
        PathConversionError: If a command has no path event counterpart
    """
    events: list[PathEvent] = []

    for command, args in recording:
        if command == "moveTo":
            events.append(MoveTo(Point.from_tuple(args[0])))

        elif command == "lineTo":
            events.append(LineTo(Point.from_tuple(args[0])))

        elif command == "qCurveTo":
            if args[-1] is None:
                raise PathConversionError(command, "contour has no on-curve points")
            if len(args) == 1:
                events.append(LineTo(Point.from_tuple(args[0])))
                continue
            for ctrl, on in decomposeQuadraticSegment(args):
                events.append(QuadraticTo(Point.from_tuple(ctrl), Point.from_tuple(on)))

        elif command == "curveTo":
            if len(args) == 1:
                events.append(LineTo(Point.from_tuple(args[0])))
            elif len(args) == 2:
                events.append(QuadraticTo(Point.from_tuple(args[0]), Point.from_tuple(args[1])))
            else:
                for pt1, pt2, pt3 in decomposeSuperBezierSegment(args):
                    events.append(
                        CubicTo(Point.from_tuple(pt1), Point.from_tuple(pt2), Point.from_tuple(pt3))
                    )

        elif command == "closePath":
            events.append(Close())

        elif command == "endPath":
            # Open contour end; the next moveTo starts a new subpath anyway
            continue

        else:
            raise PathConversionError(command, "no matching path event")

    return events


def events_to_pen(events: Iterable[PathEvent], pen: Any) -> None:
    """Replay path events on a fontTools pen.

    Open subpaths are finished with endPath() so segment pens such as
    TTGlyphPen receive a well-formed command sequence.

    Args:
        events: Path events to draw
        pen: Any object implementing the fontTools pen protocol

    Raises:
        UnsupportedEventError: If an arc event is encountered
    """
    open_subpath = False

    for event in events:
        if isinstance(event, MoveTo):
            if open_subpath:
                pen.endPath()
            pen.moveTo(event.to.to_tuple())
            open_subpath = True
        elif isinstance(event, LineTo):
            pen.lineTo(event.to.to_tuple())
        elif isinstance(event, QuadraticTo):
            pen.qCurveTo(event.ctrl.to_tuple(), event.to.to_tuple())
        elif isinstance(event, CubicTo):
            pen.curveTo(event.ctrl1.to_tuple(), event.ctrl2.to_tuple(), event.to.to_tuple())
        elif isinstance(event, Close):
            pen.closePath()
            open_subpath = False
        elif isinstance(event, ArcTo):
            raise UnsupportedEventError(event.kind, "pens cannot draw arcs; convert first")
        else:
            raise UnsupportedEventError(type(event).__name__, "not a path event")

    if open_subpath:
        pen.endPath()
