import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import pytest

# Ensure the repository root is on the path so ``npc_path`` is importable
sys.path.append(str(Path(__file__).resolve().parents[1]))

from npc_path.convergence import run_convergence
from npc_path.plots import plot_convergence, plot_path
from npc_path.sampling import sample_path


def test_plot_path_requires_columns():
    with pytest.raises(ValueError, match="y"):
        plot_path(pd.DataFrame({"x": [0.0, 1.0]}))


def test_plot_path_returns_axes():
    ax = plot_path(sample_path(0.0, 10.0, 20))
    assert ax.get_xlabel() == "x"
    assert ax.get_lines()[0].get_label() == "NPC path"
    plt.close(ax.figure)


def test_plot_convergence_with_reference():
    table = run_convergence(0.0, 1.0, [2, 4, 8])
    ax = plot_convergence(table, reference=1.5)
    labels = [line.get_label() for line in ax.get_lines()]
    assert labels == ["Calculated length", "Reference"]
    assert ax.get_xscale() == "log"
    plt.close(ax.figure)


def test_plot_convergence_linear_axis_with_zero_segments():
    table = run_convergence(0.0, 1.0, [0, 2])
    ax = plot_convergence(table)
    assert ax.get_xscale() == "linear"
    assert len(ax.get_lines()) == 1
    plt.close(ax.figure)
