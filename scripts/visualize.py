#!/usr/bin/env python3
"""
Plot a triangulation (.tri) or a benchmark CSV produced by scripts/benchmark.py.

Usage:
    python3 scripts/visualize.py out.tri [--output out.png]
    python3 scripts/visualize.py results/benchmark.csv [--output benchmark.png]
"""

import argparse
from pathlib import Path

import pandas as pd

from earclip.bench import fit_power_law
from earclip.plot import plot_benchmark, plot_tri_file
from earclip.report import log


def main():
    parser = argparse.ArgumentParser(description='Plot triangulations and benchmark results')
    parser.add_argument('input', type=Path, help='.tri file or benchmark .csv')
    parser.add_argument('--output', '-o', type=Path, default=None)
    args = parser.parse_args()

    output = args.output or args.input.with_suffix('.png')
    if args.input.suffix == '.csv':
        df = pd.read_csv(args.input)
        plot_benchmark(df, fit_power_law(df), output)
    else:
        plot_tri_file(args.input, output)
    log(f"Saved {output}")


if __name__ == '__main__':
    main()
