"""Adaptive cubic-to-quadratic approximation.

A cubic is cut into halves until every piece is close enough to a single
quadratic, then each piece is replaced by that quadratic. Pieces are produced
lazily, left to right along the original curve.

The amount of subdivision one approximator may perform is capped. Once the cap
is spent, remaining pieces are emitted as they are, without checking the error
bound. This keeps pathological inputs such as near-cusps bounded; the
``cap_exhausted`` flag reports when it happened.
"""

import math

import structlog

from quadpath.config import MAX_APPROXIMATION_ITERATIONS
from quadpath.core.geometry import (
    cubic_deviation,
    cubic_error,
    cubic_to_single_quadratic,
    split_cubic,
)
from quadpath.domain import CubicSegment, QuadraticSegment
from quadpath.exceptions import InvalidErrorBoundError, InvalidIterationCapError

logger = structlog.get_logger(__name__)


def validate_error_bound(error_bound: float) -> float:
    """Return error_bound as a float, or raise if it is not positive and finite."""
    if not math.isfinite(error_bound) or error_bound <= 0:
        raise InvalidErrorBoundError(error_bound)
    return float(error_bound)


class CubicToQuadraticIter:
    """Approximates a single cubic Bézier with a series of quadratic Béziers.

    The iterator is single-use: once exhausted it stays exhausted.

    Example:
        cubic = CubicSegment(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
        for quad in CubicToQuadraticIter(cubic, error_bound=0.01):
            print(quad.ctrl, quad.to)
    """

    def __init__(
        self,
        cubic: CubicSegment,
        error_bound: float,
        max_iterations: int = MAX_APPROXIMATION_ITERATIONS,
    ) -> None:
        """Initialize the approximator.

        Args:
            cubic: Segment to approximate
            error_bound: Maximum tolerated deviation per emitted piece (> 0)
            max_iterations: Total subdivision checks allowed for this cubic

        Raises:
            InvalidErrorBoundError: If error_bound is not positive and finite
            InvalidIterationCapError: If max_iterations is negative
        """
        if max_iterations < 0:
            raise InvalidIterationCapError(max_iterations)

        self._error_bound = validate_error_bound(error_bound)
        self._max_iterations = max_iterations
        self._iteration = 0
        self._cap_exhausted = False

        # Pending pieces, popped from the end
        self._pending: list[CubicSegment]
        d0, d1 = cubic_deviation(cubic)
        if d0.length() == 0.0 and d1.length() == 0.0:
            # Already an exact quadratic
            self._pending = [cubic]
        else:
            first, second = split_cubic(cubic, 0.5)
            self._pending = [second, first]

    @property
    def iterations(self) -> int:
        """Subdivision checks performed so far."""
        return self._iteration

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def cap_exhausted(self) -> bool:
        """True once a piece was emitted without passing the error check."""
        return self._cap_exhausted

    def __iter__(self) -> "CubicToQuadraticIter":
        return self

    def __next__(self) -> QuadraticSegment:
        if not self._pending:
            raise StopIteration

        cubic = self._pending.pop()
        converged = False

        while self._iteration < self._max_iterations:
            self._iteration += 1

            if cubic_error(cubic) < self._error_bound:
                converged = True
                break

            first, second = split_cubic(cubic, 0.5)
            self._pending.append(second)
            cubic = first

        if not converged and not self._cap_exhausted:
            self._cap_exhausted = True
            logger.warning(
                "Iteration cap exhausted, emitting unverified approximation",
                max_iterations=self._max_iterations,
                error_bound=self._error_bound,
                pending=len(self._pending),
            )

        return cubic_to_single_quadratic(cubic)
