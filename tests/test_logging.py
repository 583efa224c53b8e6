"""Tests for logging setup."""
import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from locali.core.logging import get_logger, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_installs_rich_handler_only(root_logger) -> None:
    setup_logging("debug")

    assert root_logger.level == logging.DEBUG
    assert [type(h) for h in root_logger.handlers] == [RichHandler]


def test_unknown_level_falls_back_to_warning(root_logger) -> None:
    setup_logging("chatty")

    assert root_logger.level == logging.WARNING


def test_log_file_receives_records(root_logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "locali.log"
    setup_logging("info", log_file=log_file)

    get_logger("locali.test").info("linked vimrc")
    for handler in root_logger.handlers:
        handler.flush()

    assert len(root_logger.handlers) == 2
    assert "INFO - linked vimrc" in log_file.read_text()
