"""Sample the path for plotting."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
import pandas as pd

from .curve import position


def sample_path(
    a: float,
    b: float,
    num_points: int = 200,
    sink: Callable[[pd.DataFrame], Any] | None = None,
) -> pd.DataFrame:
    """Return ``num_points`` evenly spaced ``(x, y)`` samples from ``a`` to ``b``.

    Both end points are included.  If ``sink`` is given it receives the
    resulting frame, which has the columns ``x`` and ``y``.
    """
    if num_points < 2:
        raise ValueError("num_points must be at least 2")

    step = (b - a) / (num_points - 1)
    x = a + np.arange(num_points) * step
    samples = pd.DataFrame({"x": x, "y": position(x)})
    if sink is not None:
        sink(samples)
    return samples


__all__ = ["sample_path"]
