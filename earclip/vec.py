"""Plain-tuple 2D vector helpers."""

import math
from typing import Tuple

Point = Tuple[float, float]


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def cross(a: Point, b: Point) -> float:
    """z-component of the 3D cross product of a and b."""
    return a[0] * b[1] - a[1] * b[0]


def dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length(a: Point) -> float:
    return math.hypot(a[0], a[1])


def normalized(a: Point) -> Point:
    """Unit vector along a. The zero vector stays zero."""
    d = length(a)
    if d == 0.0:
        return (0.0, 0.0)
    return (a[0] / d, a[1] / d)


def lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def midpoint(a: Point, b: Point) -> Point:
    return lerp(a, b, 0.5)
