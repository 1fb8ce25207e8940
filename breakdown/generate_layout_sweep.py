"""generate_layout_sweep.py -- Render node layouts across a curvature sweep.

One panel per K: rings drawn as faint circles, nodes sized by their size hint
and coloured by regime. Below each panel, the stitch schedule for the same K.

Usage: python breakdown/generate_layout_sweep.py [nodes_per_ring] [ring_count]
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from app.engine.curvature import CurvatureRegime, classify, describe
from app.engine.layout import generate_layout, ring_radius
from app.engine.pattern import generate_pattern

OUT_DIR = Path(__file__).resolve().parent

_BG = "#0f0f1a"
_TEXT = "#e0e0e0"
_GRID = "#2a2a4a"

_REGIME_COLORS = {
    CurvatureRegime.HYPERBOLIC: "#fbbf24",
    CurvatureRegime.EUCLIDEAN: "#059669",
    CurvatureRegime.SPHERICAL: "#45B7D1",
}

SWEEP = [-1.0, -0.5, -0.2, 0.0, 0.2, 0.5, 1.0]


# == Panels ===================================================================

def _draw_layout(ax, k: float, nodes_per_ring: int, ring_count: int) -> None:
    nodes = generate_layout(k, nodes_per_ring, ring_count)
    color = _REGIME_COLORS[classify(k)]

    theta = np.linspace(0, 2 * np.pi, 200)
    for r in range(ring_count):
        rad = ring_radius(r, k)
        ax.plot(rad * np.cos(theta), rad * np.sin(theta), color=_GRID, lw=0.6, zorder=1)

    xs = [n.x for n in nodes]
    ys = [n.y for n in nodes]
    sizes = [n.size ** 2 for n in nodes]
    ax.scatter(xs, ys, s=sizes, c=color, edgecolors=_BG, linewidths=0.4, zorder=2)

    ax.set_aspect("equal")
    ax.set_facecolor(_BG)
    ax.set_xticks([])
    ax.set_yticks([])
    for s in ax.spines.values():
        s.set_visible(False)
    ax.set_title(f"K = {k:+.2f}\n{describe(k)}", color=_TEXT, fontsize=7, pad=4)


def _draw_schedule(ax, k: float, rows: int) -> None:
    counts = generate_pattern(k, rows).stitch_counts
    color = _REGIME_COLORS[classify(k)]
    ax.bar(range(1, rows + 1), counts, color=color, width=0.7)
    ax.set_facecolor(_BG)
    ax.tick_params(colors=_TEXT, labelsize=5)
    for s in ax.spines.values():
        s.set_color(_GRID)
    ax.set_xlabel("round", color=_TEXT, fontsize=6)


# == Main =====================================================================

def main():
    nodes_per_ring = int(sys.argv[1]) if len(sys.argv) > 1 else 12
    ring_count = int(sys.argv[2]) if len(sys.argv) > 2 else 6
    out_png = OUT_DIR / f"layout_sweep_{nodes_per_ring}x{ring_count}.png"

    print(f"Rendering {len(SWEEP)} curvatures, {nodes_per_ring} nodes x {ring_count} rings")
    fig, axes = plt.subplots(
        2, len(SWEEP), figsize=(3 * len(SWEEP), 6),
        gridspec_kw={"height_ratios": [3, 1]}, facecolor=_BG,
    )
    for col, k in enumerate(SWEEP):
        _draw_layout(axes[0, col], k, nodes_per_ring, ring_count)
        _draw_schedule(axes[1, col], k, ring_count)

    fig.tight_layout()
    fig.savefig(str(out_png), dpi=150, facecolor=_BG)
    plt.close(fig)
    print(f"Saved: {out_png}")


if __name__ == "__main__":
    main()
