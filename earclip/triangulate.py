"""
Public entry points.

    >>> triangulate([(0, 0), (0, 1), (1, 1), (1, 0)]).triangles
    [(3, 0, 1), (3, 1, 2)]
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Sequence

from earclip.clipper import EarClipper, Triangle
from earclip.errors import NumericDegeneracy


@dataclass
class Triangulation:
    """Eagerly collected result of one triangulation."""
    triangles: List[Triangle] = field(default_factory=list)
    n: int = 0
    degenerate: bool = False
    zero_area: bool = False

    @property
    def expected(self) -> int:
        return self.n - 2

    @property
    def complete(self) -> bool:
        return not self.degenerate and len(self.triangles) == self.expected

    def indices(self) -> List[int]:
        """Triangles flattened into consecutive runs of three."""
        return [i for tri in self.triangles for i in tri]

    def raise_if_degenerate(self) -> None:
        if not self.degenerate:
            return
        if self.zero_area:
            msg = "polygon has zero area"
        else:
            msg = (f"ear set exhausted after {len(self.triangles)} of "
                   f"{self.expected} triangles")
        raise NumericDegeneracy(msg, self.triangles, self.expected)


def triangulate(points: Sequence[Any], *, check_simple: bool = False,
                strict: bool = False) -> Triangulation:
    """Triangulate a simple clockwise polygon.

    With ``strict`` a degenerate run raises ``NumericDegeneracy`` (carrying the
    partial triangles) instead of returning a flagged result.
    """
    clipper = EarClipper(points, check_simple=check_simple)
    triangles = list(clipper)
    result = Triangulation(triangles, clipper.n, clipper.degenerate, clipper.zero_area)
    if strict:
        result.raise_if_degenerate()
    return result


def iter_triangles(points: Sequence[Any], *, check_simple: bool = False) -> EarClipper:
    """Lazy ``(prev, tip, next)`` triangles; input is validated before returning."""
    return EarClipper(points, check_simple=check_simple)


def triangle_indices(points: Sequence[Any], *, check_simple: bool = False) -> Iterator[int]:
    """Lazy flat index stream, three integers per triangle."""
    return itertools.chain.from_iterable(EarClipper(points, check_simple=check_simple))
