"""
Deterministic polygon generators for tests, datasets and benchmarks.

Every generator returns a simple polygon in clockwise order, ready to hand
to the triangulator.
"""

import math
import random
from typing import List

from earclip.vec import Point
from earclip.winding import is_clockwise

# Fixed rotation (radians) applied to generated datasets so vertices avoid
# sharing x or y coordinates by construction.
ROT_ANGLE = 0.123456789


def to_clockwise(points: List[Point]) -> List[Point]:
    return points if is_clockwise(points) else points[::-1]


def rotate_points(points: List[Point], angle_rad: float) -> List[Point]:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


def convex_polygon(n: int, radius: float = 100.0) -> List[Point]:
    """Regular n-gon."""
    pts = [(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
           for i in range(n)]
    return to_clockwise(pts)


def star_polygon(points: int, outer: float = 2.0, inner: float = 0.8) -> List[Point]:
    """Star with `points` spikes; every inner vertex is reflex."""
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return to_clockwise(pts)


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Star-shaped polygon with random radii at sorted random angles."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    pts = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return to_clockwise(rotate_points(pts, ROT_ANGLE))


def comb_polygon(teeth: int) -> List[Point]:
    """Axis-aligned comb; many collinear and reflex vertices."""
    pts = [(0.0, 0.0), (teeth * 2.0, 0.0), (teeth * 2.0, 1.0)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1.0), (float(x), 2.0), (x - 0.5, 1.0)])
    pts.append((0.0, 1.0))
    return to_clockwise(pts)


def l_shape() -> List[Point]:
    return to_clockwise([(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)])


def arrow_shape() -> List[Point]:
    return to_clockwise([(0.0, 1.0), (2.0, 1.0), (2.0, 0.0), (4.0, 1.5), (2.0, 3.0), (2.0, 2.0), (0.0, 2.0)])


def zigzag_polygon() -> List[Point]:
    """Twelve vertices, four of them reflex, no shared axis-aligned edges."""
    return to_clockwise([
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ])


SHAPES = {
    'convex': convex_polygon,
    'random': random_polygon,
    'star': lambda n: star_polygon(max(3, n // 2)),
    'comb': lambda n: comb_polygon(max(1, (n - 4) // 3)),
}
