#!/usr/bin/env python3
"""
Generate deterministic clockwise polygon datasets for benchmarking.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from earclip.polyio import write_polygon
from earclip.report import log
from earclip.shapes import SHAPES


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000, 2000],
    )
    parser.add_argument("--shapes", nargs="+", choices=sorted(SHAPES), default=sorted(SHAPES))
    args = parser.parse_args()

    for n in args.sizes:
        for name in args.shapes:
            write_polygon(SHAPES[name](n), args.output / f"{name}_{n}.poly")

    log(f"Generated {len(args.sizes) * len(args.shapes)} polygons in {args.output}")


if __name__ == "__main__":
    main()
