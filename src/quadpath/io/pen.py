"""fontTools pen that draws cubic curves as quadratic curves."""

from typing import Any

from fontTools.pens.basePen import BasePen

from quadpath.config import MAX_APPROXIMATION_ITERATIONS
from quadpath.core.cubic import CubicToQuadraticIter, validate_error_bound
from quadpath.domain import CubicSegment, Point
from quadpath.exceptions import InvalidIterationCapError


class QuadraticPen(BasePen):
    """A fontTools pen that replaces cubic curves with quadratic ones.

    Lines and quadratic curves are forwarded to the wrapped pen unchanged;
    every cubic is approximated by CubicToQuadraticIter and drawn as a series
    of single-off-curve qCurveTo calls.

    Example:
        out = RecordingPen()
        glyph_set["a"].draw(QuadraticPen(out, error_bound=1.0))
    """

    def __init__(
        self,
        other_pen: Any,
        error_bound: float,
        max_iterations: int = MAX_APPROXIMATION_ITERATIONS,
        glyphSet: Any = None,  # noqa: N803
    ) -> None:
        if max_iterations < 0:
            raise InvalidIterationCapError(max_iterations)

        super().__init__(glyphSet)
        self._out = other_pen
        self._error_bound = validate_error_bound(error_bound)
        self._max_iterations = max_iterations
        self.cubics_converted = 0
        self.cap_exhausted_count = 0

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._out.moveTo(pt)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._out.lineTo(pt)

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self._out.qCurveTo(pt1, pt2)

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        cubic = CubicSegment(
            Point.from_tuple(self._getCurrentPoint()),
            Point.from_tuple(pt1),
            Point.from_tuple(pt2),
            Point.from_tuple(pt3),
        )
        approximator = CubicToQuadraticIter(cubic, self._error_bound, self._max_iterations)
        for quad in approximator:
            self._out.qCurveTo(quad.ctrl.to_tuple(), quad.to.to_tuple())

        self.cubics_converted += 1
        if approximator.cap_exhausted:
            self.cap_exhausted_count += 1

    def _closePath(self) -> None:
        self._out.closePath()

    def _endPath(self) -> None:
        self._out.endPath()
