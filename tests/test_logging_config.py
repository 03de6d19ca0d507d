"""Tests for wilee.logging_config."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from wilee.logging_config import PACKAGE_LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_console_handler(self, package_logger: logging.Logger) -> None:
        """A single stdout handler is attached at the requested level."""
        logger = setup_logging(logging.DEBUG)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_reconfiguration_does_not_duplicate_handlers(self, package_logger: logging.Logger) -> None:
        """Calling setup_logging twice keeps one handler."""
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger: logging.Logger, tmp_path: Path) -> None:
        """Records are also written to the optional log file."""
        log_file = tmp_path / "wilee.log"
        setup_logging(logging.INFO, str(log_file))

        assert any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")


class TestLibraryLogging:
    """Tests for the logging behaviour of the bare library."""

    def test_package_import_attaches_null_handler(self) -> None:
        """Importing wilee installs no output handler of its own."""
        import wilee

        logger = logging.getLogger(wilee.__name__)
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_setup_logging_is_not_part_of_public_api(self) -> None:
        """Logging setup stays in wilee.logging_config."""
        import wilee

        assert "setup_logging" not in wilee.__all__
