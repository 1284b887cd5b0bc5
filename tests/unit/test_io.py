"""Unit tests for the path I/O layer.

Tests for the RecordingPen converters, QuadraticPen and SVG path data helpers.
"""

import json
from unittest.mock import MagicMock

import pytest
from fontTools.pens.recordingPen import RecordingPen

from quadpath.core.cubic import CubicToQuadraticIter
from quadpath.domain import (
    ArcTo,
    Close,
    CubicSegment,
    CubicTo,
    LineTo,
    MoveTo,
    Point,
    QuadraticTo,
)
from quadpath.exceptions import (
    InvalidIterationCapError,
    PathConversionError,
    PathParseError,
    UnsupportedEventError,
)
from quadpath.io import (
    QuadraticPen,
    events_to_json,
    events_to_pen,
    events_to_svg,
    parse_svg_path,
    recording_to_events,
)


class TestRecordingToEvents:
    """Tests for recording_to_events function."""

    def test_basic_commands(self) -> None:
        """Test conversion of single-segment commands."""
        recording = [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("qCurveTo", ((15, 5), (20, 0))),
            ("curveTo", ((20, 10), (30, 10), (30, 0))),
            ("closePath", ()),
        ]
        assert recording_to_events(recording) == [
            MoveTo(Point(0, 0)),
            LineTo(Point(10, 0)),
            QuadraticTo(Point(15, 5), Point(20, 0)),
            CubicTo(Point(20, 10), Point(30, 10), Point(30, 0)),
            Close(),
        ]

    def test_truetype_implied_points(self) -> None:
        """Test that multi off-curve qCurveTo gets implied on-curve points."""
        recording = [("moveTo", ((0, 0),)), ("qCurveTo", ((1, 1), (2, 1), (3, 0)))]
        events = recording_to_events(recording)
        assert events[1:] == [
            QuadraticTo(Point(1, 1), Point(1.5, 1.0)),
            QuadraticTo(Point(2, 1), Point(3, 0)),
        ]

    def test_super_bezier(self) -> None:
        """Test that a super-Bezier curveTo becomes several cubics."""
        recording = [("moveTo", ((0, 0),)), ("curveTo", ((0, 1), (1, 2), (2, 2), (3, 1), (3, 0)))]
        events = recording_to_events(recording)
        assert len(events) > 2
        assert all(isinstance(e, CubicTo) for e in events[1:])
        assert events[-1].to == Point(3, 0)

    def test_degenerate_curves(self) -> None:
        """Test curve commands carrying only an on-curve point."""
        recording = [("qCurveTo", ((1, 1),)), ("curveTo", ((2, 2),)), ("curveTo", ((3, 3), (4, 4)))]
        assert recording_to_events(recording) == [
            LineTo(Point(1, 1)),
            LineTo(Point(2, 2)),
            QuadraticTo(Point(3, 3), Point(4, 4)),
        ]

    def test_end_path_dropped(self) -> None:
        """Test that endPath produces no event."""
        recording = [("moveTo", ((0, 0),)), ("lineTo", ((1, 0),)), ("endPath", ())]
        assert recording_to_events(recording) == [MoveTo(Point(0, 0)), LineTo(Point(1, 0))]

    def test_all_off_curve_contour(self) -> None:
        """Test that a qCurveTo without on-curve point is rejected."""
        with pytest.raises(PathConversionError, match="on-curve"):
            recording_to_events([("qCurveTo", ((0, 0), (1, 1), None))])

    def test_component_rejected(self) -> None:
        """Test that components are rejected."""
        with pytest.raises(PathConversionError):
            recording_to_events([("addComponent", ("a", (1, 0, 0, 1, 0, 0)))])


class TestEventsToPen:
    """Tests for events_to_pen function."""

    def test_replay(self) -> None:
        """Test replaying events on a RecordingPen."""
        pen = RecordingPen()
        events_to_pen(
            [
                MoveTo(Point(0, 0)),
                LineTo(Point(1, 0)),
                QuadraticTo(Point(2, 1), Point(3, 0)),
                CubicTo(Point(3, 1), Point(4, 1), Point(4, 0)),
                Close(),
            ],
            pen,
        )
        assert pen.value == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((1, 0),)),
            ("qCurveTo", ((2, 1), (3, 0))),
            ("curveTo", ((3, 1), (4, 1), (4, 0))),
            ("closePath", ()),
        ]

    def test_open_subpaths_are_ended(self) -> None:
        """Test that open subpaths receive endPath."""
        pen = MagicMock()
        events_to_pen(
            [MoveTo(Point(0, 0)), LineTo(Point(1, 0)), MoveTo(Point(5, 5)), LineTo(Point(6, 5))],
            pen,
        )
        assert pen.endPath.call_count == 2
        pen.closePath.assert_not_called()

    def test_arc_rejected(self) -> None:
        """Test that arcs cannot be drawn on a pen."""
        with pytest.raises(UnsupportedEventError):
            events_to_pen([MoveTo(Point(0, 0)), ArcTo(Point(1, 1), Point(1, 1), 0.0, 1.0)], RecordingPen())


class TestQuadraticPen:
    """Tests for QuadraticPen class."""

    def test_negative_iteration_cap(self) -> None:
        """Test that a negative cap is rejected before anything is drawn."""
        with pytest.raises(InvalidIterationCapError):
            QuadraticPen(RecordingPen(), error_bound=0.1, max_iterations=-1)

    def test_cubic_becomes_quadratics(self) -> None:
        """Test that a drawn cubic arrives as single quadratic curves."""
        out = RecordingPen()
        pen = QuadraticPen(out, error_bound=0.01)
        pen.moveTo((0, 0))
        pen.curveTo((0, 1), (1, 1), (1, 0))
        pen.closePath()

        cubic = CubicSegment(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
        expected = [
            ("qCurveTo", (q.ctrl.to_tuple(), q.to.to_tuple()))
            for q in CubicToQuadraticIter(cubic, 0.01)
        ]
        assert out.value[0] == ("moveTo", ((0, 0),))
        assert out.value[1:-1] == expected
        assert out.value[-1] == ("closePath", ())
        assert pen.cubics_converted == 1
        assert pen.cap_exhausted_count == 0

    def test_lines_and_quadratics_forwarded(self) -> None:
        """Test that non-cubic commands pass through."""
        out = RecordingPen()
        pen = QuadraticPen(out, error_bound=0.5)
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.qCurveTo((15, 5), (20, 0))
        pen.endPath()
        assert out.value == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("qCurveTo", ((15, 5), (20, 0))),
            ("endPath", ()),
        ]

    def test_cap_exhaustion_counted(self) -> None:
        """Test that cusps hitting the cap are counted."""
        pen = QuadraticPen(RecordingPen(), error_bound=1e-9, max_iterations=2)
        pen.moveTo((0, 0))
        pen.curveTo((1, 1), (0, 1), (1, 0))
        pen.endPath()
        assert pen.cap_exhausted_count == 1


class TestSvgPathData:
    """Tests for SVG path data parsing and serialization."""

    def test_parse(self) -> None:
        """Test parsing absolute commands."""
        events = parse_svg_path("M0 0 L10 0 Q15 5 20 0 C20 10 30 10 0 0 Z")
        assert events == [
            MoveTo(Point(0, 0)),
            LineTo(Point(10, 0)),
            QuadraticTo(Point(15, 5), Point(20, 0)),
            CubicTo(Point(20, 10), Point(30, 10), Point(0, 0)),
            Close(),
        ]

    def test_parse_arc_expands_to_cubics(self) -> None:
        """Test that SVG arcs are expanded into cubic curves."""
        events = parse_svg_path("M0 0 A10 10 0 0 1 20 0")
        assert isinstance(events[0], MoveTo)
        assert events[1:]
        assert all(isinstance(e, CubicTo) for e in events[1:])
        assert events[-1].to.x == pytest.approx(20.0)
        assert events[-1].to.y == pytest.approx(0.0, abs=1e-9)

    def test_parse_error(self) -> None:
        """Test that data without a leading command is rejected."""
        with pytest.raises(PathParseError):
            parse_svg_path("10 10 L 20 20")

    def test_serialize_round_trip(self) -> None:
        """Test that serialized path data parses back to the same events."""
        events = [
            MoveTo(Point(0.0, 0.0)),
            LineTo(Point(10.0, 0.0)),
            QuadraticTo(Point(15.0, 5.5), Point(20.0, 0.0)),
            LineTo(Point(0.0, 0.0)),
            Close(),
        ]
        svg = events_to_svg(events)
        assert svg.startswith("M")
        assert "Q" in svg
        assert parse_svg_path(svg) == events

    def test_json(self) -> None:
        """Test JSON serialization."""
        data = json.loads(events_to_json([MoveTo(Point(0, 0)), Close()]))
        assert data == [{"kind": "move_to", "to": {"x": 0, "y": 0}}, {"kind": "close"}]
