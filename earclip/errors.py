"""Exceptions raised by the triangulator."""

from typing import List, Optional, Sequence, Tuple


class TriangulationError(Exception):
    """Base class for everything the triangulator raises."""


class InputError(TriangulationError, ValueError):
    """Input is not a usable point sequence (too short, malformed, non-finite)."""


class GeometryError(TriangulationError):
    """Input boundary is not simple.

    ``crossings`` lists pairs of boundary edge indices that intersect.
    """

    def __init__(self, message: str, crossings: Optional[Sequence[Tuple[int, int]]] = None):
        super().__init__(message)
        self.crossings: List[Tuple[int, int]] = list(crossings or [])


class NumericDegeneracy(TriangulationError):
    """Fewer than n - 2 triangles were produced, or the polygon has no area.

    Carries the partial result so callers can still use what was clipped.
    """

    def __init__(self, message: str, triangles: Sequence[Tuple[int, int, int]], expected: int):
        super().__init__(message)
        self.triangles = list(triangles)
        self.expected = expected
