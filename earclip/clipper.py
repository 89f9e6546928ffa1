"""
Ear clipping session.

One ``EarClipper`` owns all working state for a single triangulation: the
vertex ring, the convex / reflex / ear classification and the boundary
segment cache. It is an iterator yielding one ``(prev, tip, next)`` triangle
per step, so callers can stop early and simply drop it.

Classification is incremental. After a clip only the two ring neighbours of
the clipped tip are re-examined, dispatching on the set they currently sit in:

    ear     -> stays, drops to convex, or drops to reflex
    convex  -> stays, becomes an ear, or drops to reflex
    reflex  -> stays, or becomes convex (and possibly an ear)

Ears are clipped in the order they entered the ear set.
"""

from collections import OrderedDict
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from earclip import validation
from earclip.classify import Classifier
from earclip.ring import VertexRing
from earclip.segments import boundary_segments

Triangle = Tuple[int, int, int]


class EarClipper:
    """Lazy ear clipping triangulation of a simple clockwise polygon.

    Input is validated on construction (``InputError``, and ``GeometryError``
    when ``check_simple`` is set), so nothing is raised once iteration starts.
    If floating point error empties the ear set early, iteration just ends
    and ``degenerate`` reports the shortfall.
    """

    def __init__(self, points: Sequence[Any], *, check_simple: bool = False):
        self.pts = validation.as_points(points)
        if check_simple:
            validation.check_simple(self.pts)
        self.n = len(self.pts)
        self.zero_area = validation.has_zero_area(self.pts)

        self.ring = VertexRing(self.n)
        self.segments = boundary_segments(self.pts)
        self.classifier = Classifier(self.pts, self.ring, self.segments)

        self.convex: Set[int] = set()
        self.reflex: Set[int] = set()
        self.ears: "OrderedDict[int, None]" = OrderedDict()

        self.triangles: List[Triangle] = []
        self.stats: Dict[str, int] = {
            'n': self.n,
            'classified': 0,
            'reclassified': 0,
            'clipped': 0,
        }

        self._started = False
        self._finished = False
        self._pending: Optional[Triangle] = None
        self._exhausted = False

    def __iter__(self) -> "EarClipper":
        return self

    def __next__(self) -> Triangle:
        if self._exhausted:
            raise StopIteration
        if not self._started:
            self._start()
        tri = self._step()
        if tri is None:
            self._exhausted = True
            raise StopIteration
        self.triangles.append(tri)
        return tri

    @property
    def expected(self) -> int:
        return self.n - 2

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def degenerate(self) -> bool:
        """Zero-area input, or iteration ended short of n - 2 triangles."""
        if self.zero_area:
            return True
        return self._exhausted and len(self.triangles) < self.expected

    # ------------------------------------------------------------------
    # Algorithm
    # ------------------------------------------------------------------

    def _start(self) -> None:
        self._started = True
        if self.n == 3:
            self._finish((0, 1, 2))
            return

        for i in self.ring:
            if self.classifier.is_convex(i):
                self.convex.add(i)
            else:
                self.reflex.add(i)
            self.stats['classified'] += 1

        for i in self.ring:
            if i in self.convex and self._is_ear(i):
                self.ears[i] = None

    def _finish(self, tri: Triangle) -> None:
        self._pending = tri
        self._finished = True

    def _step(self) -> Optional[Triangle]:
        if self._pending is not None:
            tri, self._pending = self._pending, None
            return tri
        if self._finished or not self.ears:
            return None

        tip, _ = self.ears.popitem(last=False)
        prev, nxt = self.ring.prev(tip), self.ring.next(tip)
        self.convex.discard(tip)
        self.ring.remove(tip)
        self.stats['clipped'] += 1

        if len(self.ring) == 3:
            # What is left is a single triangle
            self._finish((prev, nxt, self.ring.next(nxt)))
        else:
            self._update(prev)
            self._update(nxt)
        return (prev, tip, nxt)

    def _is_ear(self, i: int) -> bool:
        tri = self.classifier.triangle_with_tip(i)
        for j in self.reflex:
            if j not in tri and self.classifier.contains(tri, j):
                return False
        return True

    def _to_reflex(self, i: int) -> None:
        self.convex.discard(i)
        self.reflex.add(i)

    def _update(self, i: int) -> None:
        """Re-classify a ring neighbour of the vertex just clipped."""
        self.stats['reclassified'] += 1
        is_convex = self.classifier.is_convex

        if i in self.ears:
            if not is_convex(i):
                del self.ears[i]
                self._to_reflex(i)
            elif not self._is_ear(i):
                del self.ears[i]
        elif i in self.convex:
            if not is_convex(i):
                self._to_reflex(i)
            elif self._is_ear(i):
                self.ears[i] = None
        elif i in self.reflex:
            if is_convex(i):
                self.reflex.discard(i)
                self.convex.add(i)
                if self._is_ear(i):
                    self.ears[i] = None
