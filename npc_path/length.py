"""Total path length for a given number of segments."""

from __future__ import annotations

from .quadrature import simpson_one_third, simpson_three_eighths, trapezoid


def calculate_length(a: float, b: float, n: int) -> float:
    """Return the arc length of the path between ``a`` and ``b``.

    The integration rule is chosen from the parity of ``n``:

    * ``n <= 0`` gives ``0.0``.
    * Even ``n`` uses the composite Simpson 1/3 rule on all segments.
    * Odd ``n >= 3`` applies the 1/3 rule to the leading ``n - 3`` segments
      and the 3/8 rule to the trailing three.
    * ``n == 1`` falls back to the trapezoidal rule.

    Callers are responsible for ensuring ``b > a``.
    """
    if n <= 0:
        return 0.0
    h = (b - a) / n

    if n % 2 == 0:
        return simpson_one_third(a, n, h)
    if n >= 3:
        length = simpson_three_eighths(a + (n - 3) * h, h)
        if n > 3:
            length += simpson_one_third(a, n - 3, h)
        return length
    return trapezoid(a, b)


def travel_time(length: float, v: float) -> float:
    """Time needed to cover ``length`` at constant speed ``v``."""
    if v <= 0:
        raise ValueError("speed must be positive")
    return length / v


__all__ = ["calculate_length", "travel_time"]
