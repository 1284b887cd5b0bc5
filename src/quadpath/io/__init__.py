"""Path I/O layer for quadpath.

This module connects path events to the outside world using fontTools.

Key responsibilities:
- Convert RecordingPen command lists to path events and back onto any pen
- Draw cubic outlines as quadratics through a fontTools pen
- Parse and serialize SVG path data

Key classes:
- QuadraticPen: fontTools pen that approximates cubics with quadratics
"""

from quadpath.io.converter import events_to_pen, recording_to_events
from quadpath.io.pen import QuadraticPen
from quadpath.io.svg import events_to_json, events_to_svg, parse_svg_path

__all__ = [
    "QuadraticPen",
    "events_to_json",
    "events_to_pen",
    "events_to_svg",
    "parse_svg_path",
    "recording_to_events",
]
