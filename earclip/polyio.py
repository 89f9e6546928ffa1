"""
Reading and writing the plain-text polygon formats.

.poly:
    N
    x0 y0
    x1 y1
    ...

.tri:
    # vertices
    N
    x0 y0
    ...
    # triangles
    T
    a0 b0 c0
    ...

Lines starting with '#' and blank lines are ignored on read.
"""

from pathlib import Path
from typing import List, Sequence, Tuple, Union

from earclip.errors import InputError
from earclip.vec import Point

PathLike = Union[str, Path]


def _content_lines(path: PathLike) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [l.strip() for l in f if l.strip() and not l.lstrip().startswith("#")]
    except UnicodeDecodeError:
        raise InputError(f"{path}: not UTF-8 text") from None


def _parse_count(lines: List[str], i: int, what: str, path: PathLike) -> int:
    if i >= len(lines):
        raise InputError(f"{path}: missing {what} count")
    try:
        return int(lines[i])
    except ValueError:
        raise InputError(f"{path}: bad {what} count {lines[i]!r}") from None


def _parse_points(lines: List[str], start: int, n: int, path: PathLike) -> List[Point]:
    if start + n > len(lines):
        raise InputError(f"{path}: expected {n} vertices, found {len(lines) - start}")
    pts = []
    for line in lines[start:start + n]:
        try:
            x, y = map(float, line.split())
        except ValueError:
            raise InputError(f"{path}: bad vertex line {line!r}") from None
        pts.append((x, y))
    return pts


def read_polygon(path: PathLike) -> List[Point]:
    """Read polygon from .poly file."""
    lines = _content_lines(path)
    n = _parse_count(lines, 0, "vertex", path)
    return _parse_points(lines, 1, n, path)


def write_polygon(points: Sequence[Point], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x:.17g} {y:.17g}\n")


def read_triangulation(path: PathLike) -> Tuple[List[Point], List[Tuple[int, int, int]]]:
    """Read vertices and triangles back from a .tri file."""
    lines = _content_lines(path)
    n = _parse_count(lines, 0, "vertex", path)
    pts = _parse_points(lines, 1, n, path)

    i = 1 + n
    tris = []
    if i < len(lines):
        nt = _parse_count(lines, i, "triangle", path)
        i += 1
        if i + nt > len(lines):
            raise InputError(f"{path}: expected {nt} triangles, found {len(lines) - i}")
        for line in lines[i:i + nt]:
            try:
                a, b, c = map(int, line.split())
            except ValueError:
                raise InputError(f"{path}: bad triangle line {line!r}") from None
            tris.append((a, b, c))
    return pts, tris


def write_triangulation(points: Sequence[Point], triangles: Sequence[Tuple[int, int, int]],
                        path: PathLike) -> None:
    """Write triangulation to .tri file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# vertices\n")
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x:.17g} {y:.17g}\n")

        f.write("# triangles\n")
        f.write(f"{len(triangles)}\n")
        for t in triangles:
            f.write(f"{t[0]} {t[1]} {t[2]}\n")
