import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the repository root is on the path so ``npc_path`` is importable
sys.path.append(str(Path(__file__).resolve().parents[1]))

from npc_path.convergence import reference_length
from npc_path.curve import speed
from npc_path.length import calculate_length, travel_time
from npc_path.quadrature import simpson_one_third, simpson_three_eighths


@pytest.mark.parametrize("a, b", [(0.0, 10.0), (-3.0, 2.0), (5.0, 5.5), (-20.0, 40.0)])
def test_length_non_negative_and_zero_for_no_segments(a, b):
    assert calculate_length(a, b, 0) == 0.0
    for n in [0, 1, 2, 3, 4, 5, 10, 51, 100]:
        assert calculate_length(a, b, n) >= 0.0


def test_negative_segments_give_zero():
    assert calculate_length(0.0, 1.0, -4) == 0.0


@pytest.mark.parametrize("n", [4, 10, 100, 1000])
def test_even_segments_use_simpson_one_third(n):
    a, b = 0.0, 10.0
    h = (b - a) / n
    assert calculate_length(a, b, n) == simpson_one_third(a, n, h)


@pytest.mark.parametrize("n", [5, 7, 51, 501])
def test_odd_segments_place_three_eighths_block_last(n):
    a, b = 1.0, 4.0
    h = (b - a) / n
    expected = simpson_three_eighths(a + (n - 3) * h, h) + simpson_one_third(a, n - 3, h)
    assert calculate_length(a, b, n) == expected


def test_three_segments_use_only_three_eighths():
    a, b = 0.0, 3.0
    assert calculate_length(a, b, 3) == simpson_three_eighths(a, 1.0)


def test_single_segment_falls_back_to_trapezoid():
    a, b = 0.0, 10.0
    h = b - a
    assert calculate_length(a, b, 1) == (h / 2) * (speed(a) + speed(b))


def test_monotonic_convergence():
    lengths = [calculate_length(0.0, 10.0, n) for n in [10, 100, 1000, 10001]]
    diffs = np.abs(np.diff(lengths))
    assert np.all(np.diff(diffs) < 0)
    assert abs(lengths[-1] - lengths[-2]) < 1e-4


def test_odd_and_even_counts_agree():
    assert calculate_length(0.0, 10.0, 1000) == pytest.approx(
        calculate_length(0.0, 10.0, 1001), abs=1e-3
    )


def test_reference_scenario_and_travel_time():
    length = calculate_length(0.0, 10.0, 10001)
    assert length == pytest.approx(17.194139, abs=1e-6)
    assert length == pytest.approx(reference_length(0.0, 10.0), abs=1e-9)
    assert travel_time(length, 1.0) == length
    assert travel_time(length, 2.0) == length / 2.0


@pytest.mark.parametrize("v", [0.0, -1.0])
def test_travel_time_rejects_non_positive_speed(v):
    with pytest.raises(ValueError, match="speed must be positive"):
        travel_time(10.0, v)
