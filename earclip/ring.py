"""
Cyclic ring of active vertex indices.

Successor/predecessor links live in two fixed-size lists indexed by the
original vertex index, so neighbour queries and removal are O(1) and the
indices handed out stay the caller's original ones.
"""

from typing import Iterator, List, Optional


class VertexRing:
    """Doubly linked cycle over ``range(n)`` that only ever shrinks."""

    def __init__(self, n: int):
        self._next: List[int] = [(i + 1) % n for i in range(n)]
        self._prev: List[int] = [(i - 1) % n for i in range(n)]
        self._active: List[bool] = [True] * n
        self._size = n
        self._head: Optional[int] = 0 if n else None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, i: int) -> bool:
        return 0 <= i < len(self._active) and self._active[i]

    def __iter__(self) -> Iterator[int]:
        """Active indices in ring order, starting from the head."""
        if self._head is None:
            return
        i = self._head
        for _ in range(self._size):
            yield i
            i = self._next[i]

    @property
    def head(self) -> Optional[int]:
        return self._head

    def next(self, i: int) -> int:
        return self._next[i]

    def prev(self, i: int) -> int:
        return self._prev[i]

    def remove(self, i: int) -> None:
        """Unlink i; its former neighbours now point past it."""
        p, nx = self._prev[i], self._next[i]
        self._next[p] = nx
        self._prev[nx] = p
        self._active[i] = False
        self._size -= 1
        if self._size == 0:
            self._head = None
        elif self._head == i:
            self._head = nx
