from typing import List
import matplotlib.pyplot as plt
import numpy as np

from utils import *
from point import CoordinatePoint

def create_cartesian_plot(pts: List[CoordinatePoint], highlight_pt=None, show=True):
    if not pts:
        return None

    fig = plt.figure(figsize=(8, 8))

    # Create rainbow color gradient
    colors = plt.cm.rainbow(np.linspace(1, 0, len(pts)))

    # Plot each segment with its own color
    for i in range(len(pts)-1):
        xs = [pts[i].x, pts[i+1].x]
        ys = [pts[i].y, pts[i+1].y]
        plt.plot(xs, ys, color=colors[i], linewidth=2)

    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    plt.scatter(xs, ys, c=colors, s=30, zorder=5)

    mark = highlight_pt if highlight_pt is not None else pts[-1]
    plt.scatter(mark.x, mark.y, c='red', s=100, zorder=10,
                edgecolors='black', linewidth=2, marker='o')

    plt.grid(True)
    plt.axis('equal')
    plt.title('Point in Rectangular Coordinates')
    plt.xlabel('X')
    plt.ylabel('Y')
    if show:
        plt.show()
    return fig

def create_polar_plot(pts: List[CoordinatePoint], show=True):
    if not pts:
        return None

    thetas = [p.theta for p in pts]
    rhos = [p.rho for p in pts]

    fig = plt.figure(figsize=(8, 8))
    ax = plt.subplot(111, projection='polar')

    colors = plt.cm.rainbow(np.linspace(0, 1, len(pts)))
    for i in range(len(pts) - 1):
        ax.plot([thetas[i], thetas[i+1]], [rhos[i], rhos[i+1]], color=colors[i], linewidth=2)

    ax.scatter(thetas, rhos, c=np.linspace(0, 1, len(pts)), cmap='rainbow', s=30)

    # nan rho (theta resolved to 0) is skipped when sizing the axis
    finite_rhos = [abs(r) for t, r in zip(thetas, rhos) if is_finite_pair(t, r)]
    if len(finite_rhos) < len(pts):
        print_warning(f"{len(pts) - len(finite_rhos)} point(s) with non-finite theta or rho left out of the polar axis limit.")
    max_rho = max(finite_rhos) if finite_rhos else 0
    ax.set_rmax((max_rho or 1) * PLOT_RMAX_PADDING)
    ax.set_thetagrids(np.arange(0, 360, 45))
    ax.grid(True)
    ax.set_title('Point in Polar Coordinates')
    if show:
        plt.show()
    return fig
