"""Composite Newton-Cotes rules applied to the path speed.

All rules integrate :func:`~npc_path.curve.speed` over equally spaced nodes
starting at ``a`` with spacing ``h``.  The composite 1/3 rule handles any even
number of segments, the 3/8 rule covers a single block of three segments and
the trapezoidal rule is only used for a single segment.
"""

from __future__ import annotations

import numpy as np

from .curve import speed


def simpson_one_third(a: float, n: int, h: float) -> float:
    """Integrate over ``n`` segments with the composite Simpson 1/3 rule.

    Parameters
    ----------
    a:
        Position of the first node.
    n:
        Number of segments.  Must be even and non-negative; ``0`` yields an
        empty integral.
    h:
        Node spacing.
    """
    if n < 0 or n % 2:
        raise ValueError("n must be even and non-negative")
    if n == 0:
        return 0.0

    values = speed(a + np.arange(n + 1) * h)
    # Endpoints weight 1, odd interior nodes 4, even interior nodes 2.
    total = values[0] + values[-1]
    total += 4.0 * np.sum(values[1:-1:2])
    total += 2.0 * np.sum(values[2:-1:2])
    return float(h / 3.0 * total)


def simpson_three_eighths(a: float, h: float) -> float:
    """Integrate over exactly three segments starting at ``a``."""
    f0, f1, f2, f3 = speed(a + np.arange(4) * h)
    return float(3.0 * h / 8.0 * (f0 + 3.0 * f1 + 3.0 * f2 + f3))


def trapezoid(a: float, b: float) -> float:
    """Single-segment trapezoidal estimate between ``a`` and ``b``."""
    h = b - a
    return float(h / 2.0 * (speed(a) + speed(b)))


__all__ = ["simpson_one_third", "simpson_three_eighths", "trapezoid"]
