from __future__ import annotations

"""Plotting helpers for the path and its convergence analysis.

Plots are produced using :mod:`matplotlib` and return the
:class:`~matplotlib.axes.Axes` instance for further customisation.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
import pandas as pd

from .convergence import ConvergenceTable


def plot_path(
    samples: pd.DataFrame,
    label: str = "NPC path",
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Plot sampled path coordinates.

    Parameters
    ----------
    samples:
        Frame with ``x`` and ``y`` columns as returned by
        :func:`~npc_path.sampling.sample_path`.
    ax:
        Existing axes to draw on.  If ``None`` a new figure and axes are
        created.
    """
    missing = {"x", "y"}.difference(samples.columns)
    if missing:
        raise ValueError(f"samples missing required columns: {', '.join(sorted(missing))}")

    if ax is None:
        _, ax = plt.subplots()

    ax.plot(samples["x"], samples["y"], color="tab:blue", label=label)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend()
    return ax


def plot_convergence(
    table: ConvergenceTable,
    reference: float | None = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Plot computed length against segment count.

    If ``reference`` is given it is drawn as a horizontal line.  The segment
    axis is logarithmic since the default counts span three decades.
    """
    if ax is None:
        _, ax = plt.subplots()

    n = np.asarray(table.segment_counts, dtype=float)
    ax.plot(n, table.lengths, "o-", color="tab:red", label="Calculated length")
    if reference is not None:
        ax.axhline(reference, color="k", linestyle="--", label="Reference")
    if np.all(n > 0):
        ax.set_xscale("log")
    ax.set_xlabel("Segments n")
    ax.set_ylabel("Path length L")
    ax.legend()
    return ax
