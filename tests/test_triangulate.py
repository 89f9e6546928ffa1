import itertools
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from earclip import (
    EarClipper,
    GeometryError,
    InputError,
    NumericDegeneracy,
    Triangulation,
    iter_triangles,
    triangle_indices,
    triangulate,
)
from earclip import shapes
from earclip.verify import polygon_area, triangle_area, verify_triangulation

from conftest import BOWTIE, L_SHAPE, SQUARE

POLYGONS = [
    ("triangle", [(0.0, 0.0), (0.5, 1.0), (1.0, 0.0)]),
    ("square", SQUARE),
    ("l-shape", L_SHAPE),
    ("l-shape-generated", shapes.l_shape()),
    ("zigzag", shapes.zigzag_polygon()),
    ("star-5", shapes.star_polygon(5)),
    ("star-7", shapes.star_polygon(7)),
    ("random-20", shapes.random_polygon(20)),
    ("random-60", shapes.random_polygon(60)),
] + [(f"convex-{n}", shapes.convex_polygon(n)) for n in (3, 4, 5, 6, 7, 8, 10, 50)]


@pytest.mark.parametrize("name,pts", POLYGONS, ids=[name for name, _ in POLYGONS])
def test_triangulation_properties(name, pts):
    n = len(pts)
    result = triangulate(pts)

    assert result.complete
    assert not result.degenerate
    assert len(result.triangles) == n - 2
    assert len(result.indices()) == 3 * (n - 2)

    for tri in result.triangles:
        assert len(set(tri)) == 3
        assert all(0 <= v < n for v in tri)

    assert {v for tri in result.triangles for v in tri} == set(range(n))

    total = sum(triangle_area(pts, tri) for tri in result.triangles)
    assert total == pytest.approx(polygon_area(pts), rel=1e-9, abs=1e-9)

    assert verify_triangulation(pts, result.triangles) == (True, "OK")


def test_single_triangle_input():
    result = triangulate([(0, 0), (1, 0), (0, 1)])
    assert result.triangles == [(0, 1, 2)]


def test_l_shape_gives_four_triangles():
    assert len(triangulate(shapes.l_shape()).triangles) == 4


def test_accepts_numpy_array():
    result = triangulate(np.array(L_SHAPE))
    assert result.triangles == triangulate(L_SHAPE).triangles


def test_triangle_indices_is_flat_and_lazy():
    stream = triangle_indices(L_SHAPE)
    assert list(itertools.islice(stream, 3)) == [0, 1, 2]
    assert list(stream) == [0, 2, 3, 3, 4, 5, 3, 5, 0]


def test_iter_triangles_returns_session():
    it = iter_triangles(SQUARE)
    assert isinstance(it, EarClipper)
    assert next(it) == (3, 0, 1)


@pytest.mark.parametrize("bad", [
    [],
    [(0, 0), (1, 1)],
    [(0, 0), (1, 0), (float('nan'), 1)],
    [(0, 0), (1, 0), (0, math.inf)],
    [(0, 0), (1, 0), "ab"],
    [(0, 0), (1, 0), (0, 1, 2)],
    None,
])
def test_input_errors_raised_before_output(bad):
    with pytest.raises(InputError):
        triangle_indices(bad)
    with pytest.raises(InputError):
        EarClipper(bad)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        triangulate([(0, 0)])


def test_check_simple_rejects_bowtie():
    with pytest.raises(GeometryError) as exc:
        triangulate(BOWTIE, check_simple=True)
    assert exc.value.crossings == [(0, 2)]


def test_simplicity_not_checked_by_default():
    EarClipper(BOWTIE)


def test_check_simple_accepts_simple_polygon():
    assert triangulate(L_SHAPE, check_simple=True).complete


def test_zero_area_polygon():
    pts = [(0, 0), (1, 0), (2, 0), (3, 0)]
    result = triangulate(pts)
    assert result.degenerate
    assert not result.complete
    with pytest.raises(NumericDegeneracy) as exc:
        triangulate(pts, strict=True)
    assert exc.value.expected == 2
    assert "zero area" in str(exc.value)


def test_partial_result_raises_with_triangles():
    partial = Triangulation([(0, 1, 2)], n=6, degenerate=True)
    with pytest.raises(NumericDegeneracy) as exc:
        partial.raise_if_degenerate()
    assert exc.value.triangles == [(0, 1, 2)]
    assert exc.value.expected == 4
    assert "1 of 4" in str(exc.value)


def test_strict_passes_on_good_polygon():
    result = triangulate(L_SHAPE, strict=True)
    result.raise_if_degenerate()
    assert result.complete


def test_concurrent_calls_do_not_interfere():
    polys = [shapes.star_polygon(6), shapes.random_polygon(40)] * 4
    expected = [triangulate(p).triangles for p in polys]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda p: triangulate(p).triangles, polys))
    assert got == expected


def test_interleaved_sessions_are_independent():
    a = EarClipper(L_SHAPE)
    b = EarClipper(shapes.star_polygon(5))
    out_a, out_b = [], []
    for ta, tb in itertools.zip_longest(a, b):
        if ta is not None:
            out_a.append(ta)
        if tb is not None:
            out_b.append(tb)
    assert out_a == triangulate(L_SHAPE).triangles
    assert out_b == triangulate(shapes.star_polygon(5)).triangles
