import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the repository root is on the path so ``npc_path`` is importable
sys.path.append(str(Path(__file__).resolve().parents[1]))

from npc_path.curve import position
from npc_path.sampling import sample_path


def test_samples_include_endpoints():
    samples = sample_path(0.0, 10.0, 200)
    assert list(samples.columns) == ["x", "y"]
    assert len(samples) == 200
    assert samples["x"].iloc[0] == 0.0
    assert np.isclose(samples["x"].iloc[-1], 10.0)
    assert np.allclose(np.diff(samples["x"]), 10.0 / 199)
    assert np.allclose(samples["y"], position(samples["x"].to_numpy()))


def test_two_points():
    samples = sample_path(-1.0, 1.0, 2)
    assert samples["x"].tolist() == [-1.0, 1.0]


@pytest.mark.parametrize("bad_points", [0, 1])
def test_requires_two_points(bad_points):
    with pytest.raises(ValueError, match="at least 2"):
        sample_path(0.0, 1.0, bad_points)


def test_sink_called_once():
    calls = []
    samples = sample_path(0.0, 1.0, 5, sink=calls.append)
    assert len(calls) == 1
    assert calls[0] is samples
