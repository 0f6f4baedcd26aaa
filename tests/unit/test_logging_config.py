"""
Unit tests for root logger setup.
"""

import logging
from pathlib import Path
from typing import Iterator

import pytest

from product_catalog_api.app.core.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture
def bare_root_logger() -> Iterator[logging.Logger]:
    """Root logger with its handlers removed for the duration of a test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:

    def test_console_and_file_handlers(self, bare_root_logger: logging.Logger, tmp_path: Path) -> None:
        logfile = tmp_path / "api.log"

        setup_logging("debug", str(logfile))

        assert bare_root_logger.level == logging.DEBUG
        assert len(bare_root_logger.handlers) == 2
        assert isinstance(bare_root_logger.handlers[1], logging.FileHandler)
        assert all(h.formatter._fmt == LOG_FORMAT for h in bare_root_logger.handlers)

    def test_unknown_level_falls_back_to_info(self, bare_root_logger: logging.Logger) -> None:
        setup_logging("chatty")

        assert bare_root_logger.level == logging.INFO
        assert len(bare_root_logger.handlers) == 1

    def test_configures_only_once(self, bare_root_logger: logging.Logger) -> None:
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert len(bare_root_logger.handlers) == 1
        assert bare_root_logger.level == logging.INFO
