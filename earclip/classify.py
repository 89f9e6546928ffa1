"""
Convexity and visibility tests for vertices of the active ring.

"Convex" here is stronger than the angle test alone: the segment joining the
vertex's two ring neighbours must also be a diagonal of the original polygon,
otherwise the vertex is treated as reflex.
"""

import math
from typing import List, Sequence, Tuple

from earclip.ring import VertexRing
from earclip.segments import Segment, count_crossings, intersects, shares_endpoint
from earclip.vec import Point, cross, dot, midpoint, normalized, sub


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """Barycentric containment, boundary included. Degenerate triangles contain nothing."""
    (ax, ay), (bx, by), (cx, cy), (x, y) = a, b, c, p
    denom = (by - cy) * (ax - cx) + (cx - bx) * (ay - cy)
    if denom == 0.0:
        return False
    l1 = ((by - cy) * (x - cx) + (cx - bx) * (y - cy)) / denom
    l2 = ((cy - ay) * (x - cx) + (ax - cx) * (y - cy)) / denom
    l3 = 1.0 - l1 - l2
    return 0.0 <= l1 <= 1.0 and 0.0 <= l2 <= 1.0 and 0.0 <= l3 <= 1.0


class Classifier:
    """Geometric predicates over a clockwise polygon and its active ring.

    The boundary segments are the original polygon's edges and never change
    while the ring shrinks.
    """

    def __init__(self, points: Sequence[Point], ring: VertexRing, segments: List[Segment]):
        self.pts = points
        self.ring = ring
        self.segments = segments

    def angle_at(self, i: int) -> float:
        """Signed angle in (-pi, pi] from the edge towards prev(i) to the edge towards next(i)."""
        p = self.pts[i]
        a = normalized(sub(self.pts[self.ring.prev(i)], p))
        b = normalized(sub(self.pts[self.ring.next(i)], p))
        return math.atan2(cross(a, b), dot(a, b))

    def is_reflex(self, i: int) -> bool:
        angle = self.angle_at(i)
        return angle >= math.pi or angle < 0

    def is_diagonal(self, a: Point, b: Point) -> bool:
        """True if a-b crosses no boundary edge and its midpoint is interior."""
        for seg in self.segments:
            if not shares_endpoint(a, b, seg) and intersects(a, b, seg[0], seg[1]):
                return False
        return count_crossings(midpoint(a, b), self.segments) % 2 == 1

    def is_convex(self, i: int) -> bool:
        if self.is_reflex(i):
            return False
        return self.is_diagonal(self.pts[self.ring.prev(i)], self.pts[self.ring.next(i)])

    def triangle_with_tip(self, i: int) -> Tuple[int, int, int]:
        return (self.ring.prev(i), i, self.ring.next(i))

    def contains(self, tri: Tuple[int, int, int], j: int) -> bool:
        a, b, c = tri
        return point_in_triangle(self.pts[j], self.pts[a], self.pts[b], self.pts[c])
