"""
Plotting utilities for visualizing synthesized polynomials.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from numpy.polynomial import polynomial

from polysynth.pipeline import SynthesisResult

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


def plot_polynomial(
    result: SynthesisResult,
    save_path: str | None = None,
    num_points: int = 500,
) -> tuple[Figure, Axes]:
    """
    Plot p(x) over the span of its roots and mark each root on the x axis.

    Parameters
    ----------
    result : SynthesisResult
        Result from `solve`
    save_path : str | None, optional
        Path to save the figure (default: None, don't save)
    num_points : int, optional
        Number of samples along x (default: 500)

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure object
    ax : matplotlib.axes.Axes
        The axes object
    """
    import matplotlib.pyplot as plt

    roots = result.roots.astype(float)
    coef = result.coefficients.astype(float)

    if len(roots) > 0:
        lo, hi = roots.min(), roots.max()
    else:
        lo, hi = -1.0, 1.0
    margin = max(1.0, 0.1 * (hi - lo))
    x = np.linspace(lo - margin, hi + margin, num_points)
    y = polynomial.polyval(x, coef)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(x, y, "b-", linewidth=2, label="p(x)")
    ax.axhline(0.0, color="k", linewidth=0.8, alpha=0.6)
    if len(roots) > 0:
        ax.plot(roots, np.zeros_like(roots), "ro", label="Roots")
        for r in np.unique(roots):
            ax.annotate(
                f"{r:g}",
                xy=(r, 0.0),
                xytext=(0, 10),
                textcoords="offset points",
                ha="center",
                fontsize=9,
            )
    ax.grid(True, alpha=0.3)
    ax.set_xlabel("x")
    ax.set_ylabel("p(x)")
    ax.set_title(f"Monic polynomial of degree {result.degree}")
    ax.legend(loc="best")

    plt.tight_layout()
    if save_path:
        # Create output directory if it doesn't exist
        save_path_obj = Path(save_path)
        save_path_obj.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig, ax
