"""
Segment intersection and ray crossing tests against the polygon boundary.
"""

from typing import List, Sequence, Tuple

from earclip.vec import Point, cross, sub

Segment = Tuple[Point, Point]


def intersects(a1: Point, b1: Point, a2: Point, b2: Point) -> bool:
    """True if segment a1-b1 intersects segment a2-b2.

    Touching at a shared endpoint does not count. When a2 lies on the line
    through a1-b1 the segments are taken as overlapping iff a2 falls inside
    the first segment's span on either axis.
    """
    cmp = sub(a2, a1)
    r = sub(b1, a1)
    s = sub(b2, a2)

    cmp_x_r = cross(cmp, r)
    cmp_x_s = cross(cmp, s)
    r_x_s = cross(r, s)

    if cmp_x_r == 0.0:
        return ((a2[0] - a1[0] < 0) != (a2[0] - b1[0] < 0)) or \
               ((a2[1] - a1[1] < 0) != (a2[1] - b1[1] < 0))

    if r_x_s == 0.0:
        # Parallel, not collinear
        return False

    t = cmp_x_s / r_x_s
    u = cmp_x_r / r_x_s
    return 0.0 < t < 1.0 and 0.0 < u < 1.0


def shares_endpoint(a: Point, b: Point, seg: Segment) -> bool:
    a2, b2 = seg
    return a == a2 or a == b2 or b == a2 or b == b2


def boundary_segments(points: Sequence[Point]) -> List[Segment]:
    """Closed boundary of the polygon as (p[i], p[i+1]) pairs."""
    n = len(points)
    return [(tuple(points[i]), tuple(points[(i + 1) % n])) for i in range(n)]


def count_crossings(point: Point, segments: Sequence[Segment]) -> int:
    """Boundary crossings of the horizontal ray from point towards +x.

    Half-open in y: an edge counts only if exactly one endpoint lies strictly
    above the ray, so a vertex on the ray is counted once when the boundary
    passes through it and horizontal edges are never counted.
    """
    px, py = point
    crossings = 0
    for (x1, y1), (x2, y2) in segments:
        if (y1 > py) == (y2 > py):
            continue
        x = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
        if x > px:
            crossings += 1
    return crossings


def self_intersections(points: Sequence[Point]) -> List[Tuple[int, int]]:
    """Pairs (i, j) of non-adjacent boundary edges that intersect."""
    segs = boundary_segments(points)
    n = len(segs)
    found = []
    for i in range(n):
        a1, b1 = segs[i]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            a2, b2 = segs[j]
            if intersects(a1, b1, a2, b2) or intersects(a2, b2, a1, b1):
                found.append((i, j))
    return found
