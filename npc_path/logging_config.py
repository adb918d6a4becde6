"""Logging setup for the ``npc_path`` package."""

from __future__ import annotations

import logging
import sys

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Configure the ``npc_path`` logger.

    Parameters
    ----------
    level:
        Logging level applied to the logger and its handlers.
    log_file:
        Optional path of a file receiving the same records as the console.
    """
    logger = logging.getLogger("npc_path")
    logger.setLevel(level)

    # Avoid duplicate records when called more than once.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialised")
    return logger
