"""Run configuration and input validation.

An :class:`AnalysisConfig` bundles everything a run needs.  Values can come
from a key/value CSV parameter file (see
:func:`~npc_path.io_utils.read_params_csv`), from keyword overrides or from
both, overrides taking precedence.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .convergence import DEFAULT_SEGMENT_COUNTS
from .io_utils import read_params_csv


REQUIRED_FIELDS = ("lower", "upper", "speed")

_SCALAR_FIELDS = {
    "lower": float,
    "upper": float,
    "speed": float,
    "final_segments": lambda v: _as_int(v, "final_segments"),
    "num_points": lambda v: _as_int(v, "num_points"),
}


class InvalidIntervalError(ValueError):
    """Raised when the upper bound does not exceed the lower bound."""


def validate_interval(a: float, b: float) -> None:
    """Ensure ``b > a``."""
    if not b > a:
        raise InvalidIntervalError(f"upper bound {b} must be greater than lower bound {a}")


def _as_int(value: float, name: str) -> int:
    if not float(value).is_integer():
        raise ValueError(f"{name} {value} is not an integer")
    return int(value)


def _segment_counts(values: Iterable[float]) -> Tuple[int, ...]:
    counts = []
    for value in values:
        n = _as_int(value, "segment count")
        if n < 0:
            raise ValueError("segment counts must be non-negative")
        counts.append(n)
    if not counts:
        raise ValueError("at least one segment count is required")
    return tuple(counts)


@dataclass(frozen=True)
class AnalysisConfig:
    """Parameters of a single analysis run.

    Parameters
    ----------
    lower, upper:
        Bounds of the path interval, ``upper > lower``.
    speed:
        Constant NPC speed used for the travel-time estimate.
    segment_counts:
        Ordered segment counts for the convergence analysis.
    final_segments:
        Segment count of the high-accuracy length used for travel time.
    num_points:
        Number of path samples written for plotting.
    """

    lower: float
    upper: float
    speed: float
    segment_counts: Tuple[int, ...] = DEFAULT_SEGMENT_COUNTS
    final_segments: int = DEFAULT_SEGMENT_COUNTS[-1]
    num_points: int = 200

    def __post_init__(self) -> None:
        object.__setattr__(self, "segment_counts", _segment_counts(self.segment_counts))
        object.__setattr__(self, "final_segments", _as_int(self.final_segments, "final_segments"))
        object.__setattr__(self, "num_points", _as_int(self.num_points, "num_points"))
        validate_interval(self.lower, self.upper)
        if not self.speed > 0:
            raise ValueError("speed must be positive")
        if self.final_segments < 0:
            raise ValueError("final_segments must be non-negative")
        if self.num_points < 2:
            raise ValueError("num_points must be at least 2")


def read_config_values(path: str | Path) -> dict:
    """Read the recognised :class:`AnalysisConfig` fields from a parameter file.

    Unknown keys are ignored.  Scalar fields given several values raise
    :class:`ValueError`.
    """
    values: dict = {}
    for key, value in read_params_csv(path).items():
        if key == "segment_counts":
            values[key] = value if isinstance(value, list) else [value]
        elif key in _SCALAR_FIELDS:
            if isinstance(value, list):
                raise ValueError(f"parameter {key!r} takes a single value")
            values[key] = _SCALAR_FIELDS[key](value)
    return values


def load_config(path: str | Path | None = None, **overrides) -> AnalysisConfig:
    """Build an :class:`AnalysisConfig` from ``path`` and ``overrides``.

    Keyword arguments whose value is ``None`` are ignored so that unset
    command line options fall back to the parameter file.
    """
    values = read_config_values(path) if path is not None else {}
    values.update({k: v for k, v in overrides.items() if v is not None})

    missing = set(REQUIRED_FIELDS).difference(values)
    if missing:
        raise ValueError(f"missing required parameters: {', '.join(sorted(missing))}")
    return AnalysisConfig(**values)


__all__ = [
    "AnalysisConfig",
    "InvalidIntervalError",
    "validate_interval",
    "read_config_values",
    "load_config",
]
