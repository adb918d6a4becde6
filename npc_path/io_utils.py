from __future__ import annotations

"""Utility functions for reading and writing CSV data.

This module centralises the I/O helpers used by the demo script: a parser for
key/value parameter files describing an analysis run, a thin wrapper around
:meth:`pandas.DataFrame.to_csv` and :func:`csv_sink`, which turns a file
location into a sink suitable for
:func:`~npc_path.convergence.run_convergence` and
:func:`~npc_path.sampling.sample_path`.
"""

from pathlib import Path
from typing import Callable, Dict, List

import csv
import logging

import pandas as pd

logger = logging.getLogger(__name__)

# Matches the precision of C's ``%f``.
DEFAULT_FLOAT_FORMAT = "%f"


def read_params_csv(path: str | Path) -> Dict[str, float | List[float]]:
    """Read analysis parameters from ``path``.

    Each row holds a key followed by one or more values.  Rows with a single
    value map to a float while rows with several values (such as
    ``segment_counts,10,51,100``) map to a list of floats.  Blank rows and
    rows starting with ``#`` are ignored.
    """
    params: Dict[str, float | List[float]] = {}
    with Path(path).open(newline="") as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or all(cell.strip() == "" for cell in row):
                continue
            key = row[0].strip()
            if key.startswith("#"):
                continue
            raw_values = [cell.strip() for cell in row[1:] if cell.strip()]
            if not raw_values:
                continue
            try:
                values = [float(v) for v in raw_values]
            except ValueError as exc:
                raise ValueError(f"non-numeric value for parameter {key!r}") from exc
            params[key] = values[0] if len(values) == 1 else values
    return params


def write_csv(
    data: pd.DataFrame,
    file_path: str | Path,
    float_format: str = DEFAULT_FLOAT_FORMAT,
) -> None:
    """Write ``data`` to ``file_path`` ensuring parent directories exist."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    data.to_csv(file_path, index=False, float_format=float_format, lineterminator="\n")


def csv_sink(
    file_path: str | Path, float_format: str = DEFAULT_FLOAT_FORMAT
) -> Callable[[pd.DataFrame], bool]:
    """Return a sink writing a frame to ``file_path``.

    The sink returns ``True`` on success.  Failure to create the file is
    reported and logged but not raised, so one unwritable report does not
    abort the rest of a run.
    """
    file_path = Path(file_path)

    def sink(frame: pd.DataFrame) -> bool:
        try:
            write_csv(frame, file_path, float_format=float_format)
        except OSError as exc:
            logger.error("Failed to create %s: %s", file_path, exc)
            print(f"Error: failed to create {file_path.name}")
            return False
        logger.info("Wrote %d rows to %s", len(frame), file_path)
        print(f"-> File '{file_path.name}' created.")
        return True

    return sink


__all__ = ["read_params_csv", "write_csv", "csv_sink"]
