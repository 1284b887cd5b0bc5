"""Path event stream rewriting.

CubicToQuadraticTransformer reads path events and replaces every cubic and arc
event, in place, with the quadratic events produced by the matching
approximator. All other events pass through unchanged and in order.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

from quadpath.config import MAX_APPROXIMATION_ITERATIONS, ApproximationConfig, ArcEmissionOrder
from quadpath.core.arc import ArcToQuadraticIter
from quadpath.core.cubic import CubicToQuadraticIter, validate_error_bound
from quadpath.domain import (
    Arc,
    ArcTo,
    Close,
    CubicSegment,
    CubicTo,
    LineTo,
    MoveTo,
    PathEvent,
    Point,
    QuadraticTo,
)
from quadpath.exceptions import InvalidIterationCapError, UnsupportedEventError


class DrainState(Enum):
    """What the transformer is currently emitting from."""

    IDLE = auto()
    DRAINING_CUBIC = auto()
    DRAINING_ARC = auto()


@dataclass
class TransformStats:
    """Counters collected while transforming a path."""

    events_read: int = 0
    events_emitted: int = 0
    cubics_converted: int = 0
    arcs_converted: int = 0
    quadratics_emitted: int = 0
    cap_exhausted_count: int = 0


class CubicToQuadraticTransformer:
    """Rewrites a path event stream so it holds no cubic or arc events.

    The transformer is a lazy iterator: one input event is read only when the
    previous one has been fully emitted.

    Example:
        events = [MoveTo(Point(0, 0)), CubicTo(Point(0, 1), Point(1, 1), Point(1, 0))]
        for event in CubicToQuadraticTransformer(events, error_bound=0.01):
            print(event)
    """

    def __init__(
        self,
        events: Iterable[PathEvent],
        error_bound: float,
        max_iterations: int = MAX_APPROXIMATION_ITERATIONS,
        arc_order: ArcEmissionOrder = ArcEmissionOrder.REVERSED,
        reset_on_close: bool = False,
    ) -> None:
        """Initialize the transformer.

        Args:
            events: Source path events
            error_bound: Maximum tolerated deviation for cubic approximation
            max_iterations: Iteration cap handed to each cubic approximator
            arc_order: Emission order for arc decompositions
            reset_on_close: Move the current point back to the subpath start on close

        Raises:
            InvalidErrorBoundError: If error_bound is not positive and finite
            InvalidIterationCapError: If max_iterations is negative
        """
        if max_iterations < 0:
            raise InvalidIterationCapError(max_iterations)

        self._inner: Iterator[PathEvent] = iter(events)
        self._error_bound = validate_error_bound(error_bound)
        self._max_iterations = max_iterations
        self._arc_order = arc_order
        self._reset_on_close = reset_on_close

        self._state = DrainState.IDLE
        self._cubic_iter: CubicToQuadraticIter | None = None
        self._arc_iter: ArcToQuadraticIter | None = None

        self._last_point = Point.zero()
        self._subpath_start = Point.zero()
        self._stats = TransformStats()

    @classmethod
    def from_settings(
        cls, events: Iterable[PathEvent], config: ApproximationConfig
    ) -> "CubicToQuadraticTransformer":
        """Build a transformer from an ApproximationConfig."""
        return cls(
            events,
            error_bound=config.error_bound,
            max_iterations=config.max_iterations,
            arc_order=config.arc_order,
            reset_on_close=config.reset_on_close,
        )

    @property
    def state(self) -> DrainState:
        return self._state

    @property
    def current_point(self) -> Point:
        """Point the next curve event will start from."""
        return self._last_point

    @property
    def stats(self) -> TransformStats:
        return self._stats

    def __iter__(self) -> "CubicToQuadraticTransformer":
        return self

    def __next__(self) -> PathEvent:
        while True:
            quadratic_event = self._drain_next()
            if quadratic_event is not None:
                return self._emit(quadratic_event)

            event = next(self._inner, None)
            if event is None:
                raise StopIteration
            self._stats.events_read += 1

            if isinstance(event, CubicTo):
                cubic = CubicSegment(self._last_point, event.ctrl1, event.ctrl2, event.to)
                self._last_point = event.to
                self._cubic_iter = CubicToQuadraticIter(
                    cubic, self._error_bound, self._max_iterations
                )
                self._state = DrainState.DRAINING_CUBIC
                self._stats.cubics_converted += 1
                continue

            if isinstance(event, ArcTo):
                start_angle = (event.to - self._last_point).angle_from_x_axis() - event.angle_from
                arc = Arc(
                    center=event.to,
                    radii=event.radii,
                    start_angle=start_angle,
                    sweep_angle=event.angle_to,
                    x_rotation=event.angle_from,
                )
                self._last_point = event.to
                self._arc_iter = ArcToQuadraticIter(arc, self._arc_order)
                self._state = DrainState.DRAINING_ARC
                self._stats.arcs_converted += 1
                continue

            if isinstance(event, MoveTo):
                self._last_point = event.to
                self._subpath_start = event.to
            elif isinstance(event, (LineTo, QuadraticTo)):
                self._last_point = event.to
            elif isinstance(event, Close):
                if self._reset_on_close:
                    self._last_point = self._subpath_start
            else:
                raise UnsupportedEventError(type(event).__name__, "not a path event")

            return self._emit(event)

    def _drain_next(self) -> QuadraticTo | None:
        """Pull the next quadratic from the active approximator, if any.

        Returns to IDLE and drops the approximator once it is exhausted.
        """
        if self._state is DrainState.DRAINING_CUBIC and self._cubic_iter is not None:
            quad = next(self._cubic_iter, None)
            if quad is not None:
                self._last_point = quad.to
                return QuadraticTo(quad.ctrl, quad.to)
            if self._cubic_iter.cap_exhausted:
                self._stats.cap_exhausted_count += 1
        elif self._state is DrainState.DRAINING_ARC and self._arc_iter is not None:
            quad = next(self._arc_iter, None)
            if quad is not None:
                self._last_point = quad.to
                return QuadraticTo(quad.ctrl, quad.to)

        self._state = DrainState.IDLE
        self._cubic_iter = None
        self._arc_iter = None
        return None

    def _emit(self, event: PathEvent) -> PathEvent:
        self._stats.events_emitted += 1
        if isinstance(event, QuadraticTo) and self._state is not DrainState.IDLE:
            self._stats.quadratics_emitted += 1
        return event
