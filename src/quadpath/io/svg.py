"""SVG path data reading and writing.

Parsing goes through fontTools.svgLib, which expands SVG elliptical arcs into
cubic curves; serialization goes through fontTools' SVGPathPen.
"""

import json
from collections.abc import Iterable

from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import parse_path

from quadpath.domain import PathEvent
from quadpath.exceptions import PathParseError
from quadpath.io.converter import events_to_pen, recording_to_events


def parse_svg_path(path_data: str) -> list[PathEvent]:
    """Parse SVG path data into path events.

    Args:
        path_data: Contents of an SVG ``d`` attribute

    Returns:
        List of path events (arcs already expanded to cubics)

    Raises:
        PathParseError: If the path data is malformed
    """
    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise PathParseError(path_data, str(e)) from e

    return recording_to_events(pen.value)


def events_to_svg(events: Iterable[PathEvent]) -> str:
    """Serialize path events as SVG path data.

    Raises:
        UnsupportedEventError: If an arc event is encountered
    """
    pen = SVGPathPen(None)
    events_to_pen(events, pen)
    return pen.getCommands()


def events_to_json(events: Iterable[PathEvent], indent: int | None = 2) -> str:
    """Serialize path events as a JSON list of event dictionaries."""
    return json.dumps([event.to_dict() for event in events], indent=indent)
