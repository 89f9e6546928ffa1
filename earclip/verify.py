"""
Correctness checks for a triangulation:
1. Triangle count: n - 2 triangles for an n-vertex polygon
2. Valid indices: three distinct indices in [0, n) per triangle
3. Coverage: every vertex is used by some triangle
4. Area preservation: signed triangle areas sum to the polygon's signed area
"""

from typing import List, Sequence, Tuple

from earclip.vec import Point
from earclip.winding import signed_area

AREA_TOLERANCE = 1e-6


def triangle_area(pts: Sequence[Point], tri: Tuple[int, int, int]) -> float:
    """Signed area of triangle; positive when counter-clockwise."""
    a, b, c = pts[tri[0]], pts[tri[1]], pts[tri[2]]
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2


def polygon_area(pts: Sequence[Point]) -> float:
    return signed_area(pts)


def verify_triangulation(pts: Sequence[Point], tris: List[Tuple[int, int, int]]) -> Tuple[bool, str]:
    """Verify that triangulation is correct. Returns (ok, message)."""
    n = len(pts)

    expected = n - 2
    if len(tris) != expected:
        return False, f"Wrong count: {len(tris)} != {expected}"

    for tri in tris:
        if len(set(tri)) != 3:
            return False, f"Repeated vertex in triangle: {tri}"
        for v in tri:
            if v < 0 or v >= n:
                return False, f"Invalid vertex index: {v}"

    used = {v for tri in tris for v in tri}
    if len(used) != n:
        missing = sorted(set(range(n)) - used)
        return False, f"Unused vertices: {missing[:10]}"

    poly_a = polygon_area(pts)
    tri_a = sum(triangle_area(pts, tri) for tri in tris)
    if abs(poly_a - tri_a) > AREA_TOLERANCE * max(1.0, abs(poly_a)):
        return False, f"Area mismatch: {poly_a:.6f} vs {tri_a:.6f}"

    return True, "OK"
