r"""Analytic description of the NPC path.

The path is the graph of

.. math:: f(x) = 2 \sin x + \tfrac{1}{2} x

and its arc length over :math:`[a, b]` is the integral of the local speed
:math:`\sqrt{1 + f'(x)^2}`.  Both functions accept scalars or numpy arrays.
"""

from __future__ import annotations

import numpy as np


def position(x: float | np.ndarray) -> float | np.ndarray:
    """Return the height of the path at ``x``."""
    return 2.0 * np.sin(x) + 0.5 * x


def speed(x: float | np.ndarray) -> float | np.ndarray:
    r"""Return the arc-length integrand :math:`\sqrt{1 + f'(x)^2}` at ``x``."""
    derivative = 2.0 * np.cos(x) + 0.5
    return np.sqrt(1.0 + derivative**2)


__all__ = ["position", "speed"]
