#!/usr/bin/env python3
"""
Ear clipping triangulation of a .poly file.

Usage:
    earclip --input polygon.poly --output out.tri [--reorient] [--check-simple] [--strict] [--verify]

Prints one summary line per run:
    earclip,vertices=N,triangles=T,time_ms=X
"""

import argparse
import sys
import time
from typing import List, Optional

from earclip.errors import NumericDegeneracy, TriangulationError
from earclip.polyio import read_polygon, write_triangulation
from earclip.report import log, summary_line
from earclip.triangulate import triangulate
from earclip.verify import verify_triangulation
from earclip.winding import clockwise


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Ear clipping triangulation of a simple polygon')
    parser.add_argument('--input', '-i', required=True, help='Input polygon file')
    parser.add_argument('--output', '-o', required=True, help='Output triangulation file')
    parser.add_argument('--reorient', action='store_true',
                        help='Reorder vertices clockwise (by the first three points) before triangulating')
    parser.add_argument('--check-simple', action='store_true',
                        help='Reject self-intersecting polygons before triangulating')
    parser.add_argument('--strict', action='store_true',
                        help='Fail instead of writing a partial triangulation')
    parser.add_argument('--verify', action='store_true',
                        help='Check triangle count and area after triangulating')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        pts = read_polygon(args.input)
        if args.reorient:
            pts = clockwise(pts)

        start = time.perf_counter()
        result = triangulate(pts, check_simple=args.check_simple, strict=args.strict)
        end = time.perf_counter()
    except NumericDegeneracy as e:
        log(f"error: {e} ({len(e.triangles)} triangles kept)", sys.stderr)
        return 2
    except (TriangulationError, OSError) as e:
        log(f"error: {e}", sys.stderr)
        return 1

    elapsed_ms = (end - start) * 1000

    try:
        write_triangulation(pts, result.triangles, args.output)
    except OSError as e:
        log(f"error: cannot write {args.output}: {e}", sys.stderr)
        return 1
    if result.degenerate:
        log(f"warning: degenerate input, wrote {len(result.triangles)} of "
            f"{result.expected} triangles", sys.stderr)

    if args.verify:
        ok, msg = verify_triangulation(pts, result.triangles)
        if not ok:
            log(f"verify failed: {msg}", sys.stderr)
            return 3

    print(summary_line('earclip', len(pts), len(result.triangles), elapsed_ms))
    return 0


if __name__ == '__main__':
    sys.exit(main())
