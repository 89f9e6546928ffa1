import pytest

from earclip.verify import triangle_area

# Clockwise L: vertex 3 at (1, 1) is the only reflex corner.
L_SHAPE = [(0.0, 0.0), (0.0, 2.0), (1.0, 2.0), (1.0, 1.0), (2.0, 1.0), (2.0, 0.0)]

# Clockwise unit square.
SQUARE = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

BOWTIE = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]


@pytest.fixture
def l_shape():
    return list(L_SHAPE)


@pytest.fixture
def square():
    return list(SQUARE)


def strictly_inside(pts, tri, j):
    """True if vertex j lies strictly inside triangle tri (not on its boundary)."""
    a, b, c = tri
    areas = [triangle_area(pts, (a, b, j)), triangle_area(pts, (b, c, j)), triangle_area(pts, (c, a, j))]
    return all(x > 1e-12 for x in areas) or all(x < -1e-12 for x in areas)
