"""Elliptical arc to quadratic approximation."""

from collections import deque

from quadpath.config import ArcEmissionOrder
from quadpath.core.geometry import arc_to_quadratics
from quadpath.domain import Arc, QuadraticSegment


class ArcToQuadraticIter:
    """Approximates an elliptical arc with quadratic Béziers.

    The whole decomposition is computed up front and buffered; segments are
    then handed out one at a time.
    """

    def __init__(self, arc: Arc, order: ArcEmissionOrder = ArcEmissionOrder.REVERSED) -> None:
        self._order = order
        self._segments: deque[QuadraticSegment] = deque(arc_to_quadratics(arc))

    @property
    def order(self) -> ArcEmissionOrder:
        return self._order

    @property
    def remaining(self) -> int:
        """Number of buffered segments not yet emitted."""
        return len(self._segments)

    def __iter__(self) -> "ArcToQuadraticIter":
        return self

    def __next__(self) -> QuadraticSegment:
        if not self._segments:
            raise StopIteration
        if self._order is ArcEmissionOrder.REVERSED:
            return self._segments.pop()
        return self._segments.popleft()
