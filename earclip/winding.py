"""
Winding order helpers.

The triangulator expects clockwise input. ``clockwise`` is the cheap reorder
step callers run beforehand; it only looks at the first three points, so a
polygon whose first corner is reflex (or collinear) can come out the wrong
way round. ``is_clockwise`` uses the full shoelace sum and is what the
validation and tooling code relies on.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from earclip.vec import Point

T = TypeVar("T")


def orientation(a: Point, b: Point, c: Point) -> float:
    """Non-negative for a clockwise (or straight) turn a -> b -> c."""
    (x1, y1), (x2, y2), (x3, y3) = a, b, c
    return (y2 - y1) * (x3 - x2) - (y3 - y2) * (x2 - x1)


def clockwise(items: Sequence[T], key: Optional[Callable[[T], Point]] = None) -> List[T]:
    """Return items as a list in clockwise order, judged by the first three.

    ``key`` maps an item to its point, so records carrying a position can be
    reordered directly.
    """
    items = list(items)
    if len(items) < 3:
        return items
    if key is None:
        key = lambda item: item
    a, b, c = (key(item) for item in items[:3])
    if orientation(a, b, c) >= 0:
        return items
    return items[::-1]


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise polygons."""
    n = len(points)
    area = 0.0
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        area += x1 * y2 - x2 * y1
    return area / 2


def is_clockwise(points: Sequence[Point]) -> bool:
    return signed_area(points) < 0
