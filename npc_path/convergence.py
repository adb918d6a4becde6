"""Convergence analysis of the computed path length.

:func:`run_convergence` evaluates :func:`~npc_path.length.calculate_length`
for a sequence of segment counts and collects the results in a
:class:`ConvergenceTable`.  The default sequence mixes even and odd counts so
both branches of the parity dispatch are exercised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.integrate import quad

from .curve import speed
from .length import calculate_length

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_COUNTS: Tuple[int, ...] = (10, 51, 100, 501, 1000, 5000, 10001)

Sink = Callable[[pd.DataFrame], Any]


@dataclass(frozen=True)
class ConvergenceTable:
    """Path length for each segment count, in the order they were evaluated."""

    segment_counts: np.ndarray
    lengths: np.ndarray

    def __post_init__(self) -> None:
        if self.segment_counts.shape != self.lengths.shape:
            raise ValueError("segment_counts and lengths must have the same shape")
        self.segment_counts.setflags(write=False)
        self.lengths.setflags(write=False)

    def __len__(self) -> int:
        return int(self.segment_counts.size)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        for n, length in zip(self.segment_counts, self.lengths):
            yield int(n), float(length)

    @property
    def final_length(self) -> float:
        """Length computed with the last segment count."""
        return float(self.lengths[-1])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "n_segments": self.segment_counts,
                "calculated_length": self.lengths,
            }
        )


def run_convergence(
    a: float,
    b: float,
    n_list: Iterable[int] = DEFAULT_SEGMENT_COUNTS,
    sink: Sink | None = None,
) -> ConvergenceTable:
    """Compute the path length on ``[a, b]`` for every count in ``n_list``.

    Parameters
    ----------
    a, b:
        Integration bounds with ``b > a``.
    n_list:
        Ordered segment counts.  The output preserves this order.
    sink:
        Optional callable receiving the finished table as a
        :class:`~pandas.DataFrame`, e.g. a CSV writer from
        :func:`~npc_path.io_utils.csv_sink`.
    """
    counts: Sequence[int] = [int(n) for n in n_list]
    lengths = []
    for n in counts:
        length = calculate_length(a, b, n)
        logger.debug("n=%d -> L=%.10f", n, length)
        lengths.append(length)

    table = ConvergenceTable(
        np.asarray(counts, dtype=int),
        np.asarray(lengths, dtype=float),
    )
    if sink is not None:
        sink(table.to_frame())
    return table


def reference_length(a: float, b: float, tol: float = 1e-12) -> float:
    """High-precision reference length from adaptive Gauss-Kronrod quadrature."""
    value, error = quad(speed, a, b, epsabs=tol, epsrel=tol, limit=500)
    logger.debug("reference length %.15f (error estimate %.2e)", value, error)
    return float(value)


__all__ = [
    "DEFAULT_SEGMENT_COUNTS",
    "ConvergenceTable",
    "run_convergence",
    "reference_length",
]
