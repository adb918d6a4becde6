from __future__ import annotations

"""Command line demo for the NPC path length analysis.

Running ``python -m npc_path.run_demo`` computes the arc length of the path
``f(x) = 2*sin(x) + 0.5*x`` over a user supplied interval, shows how the
result converges as the number of segments grows and estimates the time an
NPC moving at constant speed needs to travel the path.  Results are written
to CSV files under a time-stamped directory in ``outputs``:

``convergence_analysis.csv``
    Segment count versus calculated length.
``path_data.csv``
    Sampled ``(x, y)`` coordinates of the path for visualisation.

Bounds and speed not given on the command line or in a parameter file are
prompted for interactively.
"""

from pathlib import Path
from datetime import datetime
import argparse
import logging
import sys
import time
from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd

from .config import AnalysisConfig, InvalidIntervalError, load_config, read_config_values
from .convergence import reference_length, run_convergence
from .io_utils import csv_sink
from .length import calculate_length, travel_time
from .logging_config import setup_logging
from .plots import plot_convergence, plot_path
from .sampling import sample_path

logger = logging.getLogger(__name__)

TABLE_RULE = "+-----------------+------------------------+"

PROMPTS = {
    "lower": "Enter the path start point (a): ",
    "upper": "Enter the path end point (b): ",
    "speed": "Enter the NPC speed (units/second, v): ",
}


def print_convergence_table(rows: Iterable[tuple[int, float]]) -> None:
    """Print ``(n, length)`` rows as a fixed-width console table."""
    print("\n--- Path Length Convergence Analysis ---")
    print(TABLE_RULE)
    print(f"| {'Segments (n)':<15} | {'Path length (L)':<22} |")
    print(TABLE_RULE)
    for n, length in rows:
        print(f"| {int(n):<15d} | {float(length):<22.10f} |")
    print(TABLE_RULE)


def _save_figure(ax: plt.Axes, file_path: Path) -> None:
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        ax.figure.savefig(file_path)
    except OSError as exc:
        logger.error("Failed to save plot %s: %s", file_path, exc)
        print(f"Error: failed to create {file_path.name}")
    else:
        logger.info("Saved plot %s", file_path)
    finally:
        plt.close(ax.figure)


def run(
    config: AnalysisConfig,
    out_dir: str | Path | None = None,
    plot: bool = False,
) -> tuple[float, float, Path]:
    """Execute the analysis and return path length, travel time and output directory.

    Parameters
    ----------
    config:
        Validated run parameters.
    out_dir:
        Directory receiving the CSV reports.  Defaults to
        ``outputs/<timestamp>``.
    plot:
        Also save PNG figures of the path and the convergence analysis.
    """
    start_time = time.perf_counter()
    a, b = config.lower, config.upper

    if out_dir is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        out_dir = Path("outputs") / timestamp
    out_dir = Path(out_dir)

    write_table = csv_sink(out_dir / "convergence_analysis.csv")

    def report_table(frame: pd.DataFrame) -> bool:
        print_convergence_table(frame.itertuples(index=False))
        return write_table(frame)

    table = run_convergence(a, b, config.segment_counts, sink=report_table)

    # High-accuracy length for the travel-time estimate
    length = calculate_length(a, b, config.final_segments)
    duration = travel_time(length, config.speed)
    print("\n--- Final Results ---")
    print(f"Accurate path length (L): {length:f} units")
    print(f"Estimated travel time (T = L/v): {duration:f} seconds\n")

    reference = reference_length(a, b)
    logger.info(
        "Length with n=%d differs from reference %.12f by %.3e",
        config.final_segments,
        reference,
        abs(length - reference),
    )

    samples = sample_path(
        a, b, config.num_points, sink=csv_sink(out_dir / "path_data.csv")
    )

    if plot:
        _save_figure(plot_path(samples), out_dir / "path.png")
        _save_figure(plot_convergence(table, reference), out_dir / "convergence.png")

    logger.info("Total runtime: %.3f s", time.perf_counter() - start_time)
    return length, duration, out_dir


def _prompt_missing(values: dict, known: Iterable[str] = ()) -> None:
    """Ask on stdin for every required input absent from ``values`` and ``known``."""
    for key, prompt in PROMPTS.items():
        if values.get(key) is None and key not in known:
            try:
                raw = input(prompt)
            except EOFError as exc:
                raise ValueError(f"no value given for {key}") from exc
            try:
                values[key] = float(raw)
            except ValueError as exc:
                raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse the length of the NPC path")
    parser.add_argument("--lower", "-a", type=float, default=None, help="Path start point a")
    parser.add_argument("--upper", "-b", type=float, default=None, help="Path end point b")
    parser.add_argument("--speed", "-v", type=float, default=None, help="NPC speed in units/second")
    parser.add_argument("--config", default=None, help="Key/value parameter CSV")
    parser.add_argument(
        "--segments",
        type=int,
        nargs="+",
        default=None,
        help="Segment counts for the convergence analysis",
    )
    parser.add_argument(
        "--final-segments",
        type=int,
        default=None,
        help="Segment count for the accurate length (default: 10001)",
    )
    parser.add_argument(
        "--num-points", type=int, default=None, help="Number of path samples for plotting"
    )
    parser.add_argument("--out-dir", default=None, help="Output directory")
    parser.add_argument("--plot", action="store_true", help="Save PNG figures")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), args.log_file)

    print("--- NPC Path Length Analyzer ---")
    print("Analysing the path f(x) = 2*sin(x) + 0.5*x\n")

    overrides = {
        "lower": args.lower,
        "upper": args.upper,
        "speed": args.speed,
        "segment_counts": args.segments,
        "final_segments": args.final_segments,
        "num_points": args.num_points,
    }
    try:
        from_file = read_config_values(args.config) if args.config is not None else {}
        _prompt_missing(overrides, known=from_file)
        config = load_config(args.config, **overrides)
    except InvalidIntervalError as exc:
        logger.error("Invalid interval: %s", exc)
        print("Error: invalid input, make sure b > a.")
        return 1
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"Error: {exc}")
        return 1

    _, _, out_dir = run(config, out_dir=args.out_dir, plot=args.plot)
    print(f"Outputs written to {out_dir}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
