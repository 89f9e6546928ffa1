"""
Ear clipping triangulation of simple polygons.

Input is a clockwise sequence of (x, y) points; output triangles reference
the original vertex indices.
"""

from earclip.clipper import EarClipper, Triangle
from earclip.errors import GeometryError, InputError, NumericDegeneracy, TriangulationError
from earclip.triangulate import Triangulation, iter_triangles, triangle_indices, triangulate
from earclip.winding import clockwise, is_clockwise, orientation, signed_area

__version__ = "0.1.0"

__all__ = [
    "EarClipper",
    "GeometryError",
    "InputError",
    "NumericDegeneracy",
    "Triangle",
    "Triangulation",
    "TriangulationError",
    "clockwise",
    "is_clockwise",
    "iter_triangles",
    "orientation",
    "signed_area",
    "triangle_indices",
    "triangulate",
]
