"""Tests for core logging module."""

import logging
from io import StringIO

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "bento"

    def test_setup_logging_writes_to_stream(self) -> None:
        """Messages at or above the configured level reach the stream."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        output = stream.getvalue()
        assert "test_setup - DEBUG - test message" in output

        # Restore a quiet default for the rest of the session
        setup_logging(level=logging.WARNING)
