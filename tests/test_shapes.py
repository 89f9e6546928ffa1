import pytest

from earclip import shapes
from earclip.segments import self_intersections
from earclip.winding import is_clockwise


@pytest.mark.parametrize("pts", [
    shapes.convex_polygon(9),
    shapes.star_polygon(5),
    shapes.random_polygon(30),
    shapes.l_shape(),
    shapes.zigzag_polygon(),
])
def test_generated_polygons_are_simple_and_clockwise(pts):
    assert is_clockwise(pts)
    assert self_intersections(pts) == []


@pytest.mark.parametrize("name", sorted(shapes.SHAPES))
def test_registry_shapes_are_clockwise(name):
    pts = shapes.SHAPES[name](40)
    assert len(pts) >= 3
    assert is_clockwise(pts)


def test_random_polygon_is_deterministic():
    assert shapes.random_polygon(25, seed=7) == shapes.random_polygon(25, seed=7)
    assert shapes.random_polygon(25, seed=7) != shapes.random_polygon(25, seed=8)


def test_comb_polygon_size():
    assert len(shapes.comb_polygon(3)) == 4 + 3 * 3
    assert is_clockwise(shapes.arrow_shape())
