"""Core approximation algorithms for quadpath.

This module contains the core algorithms for:

- Geometry operations (De Casteljau splitting, deviation bounds, arc decomposition)
- Cubic approximation (adaptive subdivision under an iteration cap)
- Arc approximation (buffered quadratic decomposition)
- Path event stream rewriting
- Conversion orchestration

Key functions:
- split_cubic / split_quadratic: Split a segment at a parameter
- cubic_error: Deviation bound between a cubic and its quadratic fit
- cubic_to_single_quadratic: Best single-quadratic fit of a cubic
- arc_to_quadratics: Decompose an elliptical arc into quadratics

Key classes:
- CubicToQuadraticIter: Lazily approximates one cubic
- ArcToQuadraticIter: Hands out one arc's quadratic decomposition
- CubicToQuadraticTransformer: Rewrites a path event stream
- PathProcessor: Runs conversions with logging and statistics
"""

from quadpath.core.arc import ArcToQuadraticIter
from quadpath.core.cubic import CubicToQuadraticIter
from quadpath.core.geometry import (
    arc_to_quadratics,
    cubic_deviation,
    cubic_error,
    cubic_to_single_quadratic,
    line_intersection,
    split_cubic,
    split_quadratic,
)
from quadpath.core.processor import PathProcessor, ProcessingResult
from quadpath.core.transformer import (
    CubicToQuadraticTransformer,
    DrainState,
    TransformStats,
)

__all__ = [
    # Approximators
    "ArcToQuadraticIter",
    "CubicToQuadraticIter",
    # Transformer
    "CubicToQuadraticTransformer",
    "DrainState",
    # Processor
    "PathProcessor",
    "ProcessingResult",
    "TransformStats",
    # Geometry functions
    "arc_to_quadratics",
    "cubic_deviation",
    "cubic_error",
    "cubic_to_single_quadratic",
    "line_intersection",
    "split_cubic",
    "split_quadratic",
]
