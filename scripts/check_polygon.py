#!/usr/bin/env python3
"""Report self-intersections and winding of a .poly file."""
import sys

from earclip.polyio import read_polygon
from earclip.segments import self_intersections
from earclip.winding import is_clockwise

pts = read_polygon(sys.argv[1])
n = len(pts)

crossings = self_intersections(pts)
for i, j in crossings[:4]:
    print(f'Intersection: edge {i}-{(i+1)%n} with {j}-{(j+1)%n}')

print(f'Total intersections: {len(crossings)}')
print(f'Polygon vertices: {n}')
print(f'Winding: {"clockwise" if is_clockwise(pts) else "counter-clockwise"}')

sys.exit(1 if crossings else 0)
