#!/usr/bin/env python3
"""
Benchmark the ear clipping triangulator on generated polygons.

Usage:
    python3 scripts/benchmark.py [--sizes N1 N2 ...] [--runs R] [--shapes convex random star]
"""

import argparse
from pathlib import Path

from earclip.bench import fit_power_law, run_benchmark
from earclip.report import log
from earclip.shapes import SHAPES

ROOT = Path(__file__).resolve().parent.parent
RESULTS_DIR = ROOT / "results"


def main():
    parser = argparse.ArgumentParser(description='Ear clipping benchmark')
    parser.add_argument('--sizes', nargs='+', type=int, default=[10, 50, 100, 250, 500, 1000])
    parser.add_argument('--runs', type=int, default=3)
    parser.add_argument('--shapes', nargs='+', choices=sorted(SHAPES), default=['convex', 'random', 'star'])
    parser.add_argument('--output', type=Path, default=RESULTS_DIR / 'benchmark.csv')
    args = parser.parse_args()

    log(f"Benchmarking sizes={args.sizes} runs={args.runs}")
    df = run_benchmark(args.sizes, args.shapes, args.runs, progress=log)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    log(f"Wrote {len(df)} rows to {args.output}")

    bad = df[df['degenerate']]
    for _, row in bad.iterrows():
        log(f"degenerate: {row['polygon_type']} n={row['num_vertices']} "
            f"triangles={row['triangles']}")

    for ptype, fit in fit_power_law(df).items():
        log(f"{ptype:>8}: T ~ {fit['a']:.3g} * n^{fit['b']:.2f}  (R^2={fit['r2']:.3f})")


if __name__ == '__main__':
    main()
