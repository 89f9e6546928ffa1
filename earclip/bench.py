"""
Timing harness: runs the triangulator over generated polygons and fits the
empirical scaling law T = a * n^b.
"""

import statistics
import time
from typing import Callable, Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd
from scipy.optimize import curve_fit

from earclip.shapes import SHAPES
from earclip.triangulate import triangulate
from earclip.vec import Point


def power_law(x, a, b):
    return a * (x ** b)


def log_power_law(x, log_a, b):
    return log_a + b * np.log(x)


def time_triangulation(points: Sequence[Point], runs: int = 3) -> Dict[str, float]:
    """Median wall time over `runs` triangulations of the same polygon."""
    times = []
    result = None
    for _ in range(runs):
        start = time.perf_counter()
        result = triangulate(points)
        times.append((time.perf_counter() - start) * 1000)
    return {
        'time_ms': statistics.median(times),
        'triangles': len(result.triangles),
        'degenerate': result.degenerate,
    }


def run_benchmark(sizes: Iterable[int], shapes: Iterable[str] = ('convex', 'random', 'star'),
                  runs: int = 3, progress: Callable[[str], None] = None) -> pd.DataFrame:
    """One row per (polygon type, size) with timing and outcome columns."""
    rows: List[Dict] = []
    for name in shapes:
        make = SHAPES[name]
        for n in sizes:
            pts = make(n)
            row = {'polygon_type': name, 'num_vertices': len(pts)}
            row.update(time_triangulation(pts, runs))
            rows.append(row)
            if progress is not None:
                progress(f"{name:>8} n={len(pts):>6}  {row['time_ms']:.3f} ms"
                         f"  triangles={row['triangles']}")
    return pd.DataFrame(rows)


def fit_power_law(df: pd.DataFrame) -> Dict[str, Dict[str, float]]:
    """Fit T = a * n^b per polygon type. Types with fewer than 3 sizes are skipped."""
    results = {}
    for ptype in df['polygon_type'].unique():
        data = df[df['polygon_type'] == ptype].groupby('num_vertices')['time_ms'].mean().reset_index()
        data = data[data['time_ms'] > 0].sort_values('num_vertices')
        if len(data) < 3:
            continue

        x_data = data['num_vertices'].values.astype(float)
        y_data = data['time_ms'].values.astype(float)
        popt, _ = curve_fit(log_power_law, x_data, np.log(y_data), p0=[np.log(y_data[0]), 1])
        log_a_fit, b_fit = popt

        y_pred = log_power_law(x_data, log_a_fit, b_fit)
        ss_res = np.sum((np.log(y_data) - y_pred) ** 2)
        ss_tot = np.sum((np.log(y_data) - np.mean(np.log(y_data))) ** 2)
        r_squared = 1 - (ss_res / ss_tot) if ss_tot > 0 else 0

        results[ptype] = {'a': float(np.exp(log_a_fit)), 'b': float(b_fit), 'r2': float(r_squared)}
    return results
