import logging
import sys
from pathlib import Path

import pytest

# Ensure the repository root is on the path so ``npc_path`` is importable
sys.path.append(str(Path(__file__).resolve().parents[1]))

from npc_path.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("npc_path")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_is_idempotent():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG)
    assert logger.name == "npc_path"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logging(logging.INFO, str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("npc_path.convergence").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "npc_path.convergence - INFO - hello" in log_file.read_text()
