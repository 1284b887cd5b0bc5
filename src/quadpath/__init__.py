"""Quadpath - Approximate cubic and arc path segments with quadratic Béziers.

Quadpath rewrites a stream of vector-path drawing events so that every cubic
Bézier and elliptical arc segment is replaced, in place, by a run of quadratic
Bézier segments that stay within a caller-supplied error bound. It is meant as a
preprocessing stage for renderers that only understand lines and quadratics.

Example:
    $ quadpath "M0 0 C0 1 1 1 1 0" --error-bound 0.01

This prints the same path using only M, L, Q and Z commands.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
