"""
Matplotlib figures for triangulations and benchmark results.
"""

from pathlib import Path
from typing import Dict, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from earclip.bench import power_law
from earclip.polyio import read_triangulation

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['figure.figsize'] = (10, 6)

COLORS = {
    'convex': '#377eb8',
    'random': '#e41a1c',
    'star': '#4daf4a',
    'comb': '#ff7f00',
}


def plot_triangulation(vertices, triangles: Sequence[Tuple[int, int, int]], title: str, ax,
                       color: str = '#377eb8') -> None:
    """Plot a single triangulation"""
    vertices = np.asarray(vertices, dtype=float)
    patches = [MplPolygon(vertices[list(tri)], closed=True) for tri in triangles]

    p = PatchCollection(patches, alpha=0.4, facecolor=color, edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)

    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=20, zorder=5)

    ax.set_aspect('equal')
    ax.set_title(title)


def plot_tri_file(tri_path: Union[str, Path], output: Union[str, Path]) -> None:
    vertices, triangles = read_triangulation(tri_path)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_triangulation(vertices, triangles, f'{Path(tri_path).stem} ({len(triangles)} triangles)', ax)
    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_benchmark(df: pd.DataFrame, fits: Dict[str, Dict[str, float]],
                   output: Union[str, Path]) -> None:
    """Log-log time vs n per polygon type, with fitted power laws dashed."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for ptype in df['polygon_type'].unique():
        data = df[df['polygon_type'] == ptype].groupby('num_vertices')['time_ms'].mean().reset_index()
        color = COLORS.get(ptype, 'gray')
        label = ptype
        if ptype in fits:
            label = f"{ptype} (b={fits[ptype]['b']:.2f})"
            x_fit = np.logspace(np.log10(data['num_vertices'].min()),
                                np.log10(data['num_vertices'].max()), 50)
            ax.plot(x_fit, power_law(x_fit, fits[ptype]['a'], fits[ptype]['b']), '--',
                    color=color, alpha=0.5, linewidth=1.5)
        ax.plot(data['num_vertices'], data['time_ms'], 'o-', label=label,
                color=color, linewidth=2, markersize=6)

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('Ear Clipping Performance')
    ax.legend(loc='upper left')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
