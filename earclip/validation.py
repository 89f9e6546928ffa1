"""
Eager input checks, run before any triangle is produced.
"""

import math
from typing import Any, List, Sequence

from earclip.errors import GeometryError, InputError
from earclip.segments import self_intersections
from earclip.vec import Point
from earclip.winding import signed_area

# Relative to the squared bounding-box diagonal.
ZERO_AREA_EPS = 1e-12


def as_points(points: Sequence[Any]) -> List[Point]:
    """Copy input into a list of float (x, y) tuples, rejecting bad input."""
    try:
        n = len(points)
    except TypeError:
        raise InputError("points must be a sized sequence of (x, y) pairs") from None
    if n < 3:
        raise InputError(f"a polygon needs at least 3 points, got {n}")

    pts = []
    for i, p in enumerate(points):
        try:
            x, y = p
            x, y = float(x), float(y)
        except (TypeError, ValueError):
            raise InputError(f"point {i} is not an (x, y) pair: {p!r}") from None
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InputError(f"point {i} has a non-finite coordinate: ({x}, {y})")
        pts.append((x, y))
    return pts


def has_zero_area(points: Sequence[Point]) -> bool:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    scale = (max(xs) - min(xs)) ** 2 + (max(ys) - min(ys)) ** 2
    return abs(signed_area(points)) <= ZERO_AREA_EPS * scale


def check_simple(points: Sequence[Point]) -> None:
    """Raise GeometryError if any two non-adjacent edges intersect. O(n^2)."""
    crossings = self_intersections(points)
    if crossings:
        i, j = crossings[0]
        raise GeometryError(
            f"polygon is not simple: edge {i} intersects edge {j}"
            f" ({len(crossings)} intersecting pair(s))",
            crossings,
        )
