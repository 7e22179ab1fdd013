"""Unit tests for logging configuration helpers."""

import io
import logging

import pytest

from adf2md.logging_utils import PACKAGE_LOGGER_NAME, configure_logging


@pytest.fixture
def package_logger():
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    try:
        yield logger
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            logger.addHandler(handler)
        logger.setLevel(saved_level)


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_from_name(self, package_logger):
        """Test that string level names are resolved."""
        logger = configure_logging("debug")
        assert logger is package_logger
        assert logger.level == logging.DEBUG

    def test_unknown_level_name_defaults_to_warning(self, package_logger):
        """Test the fallback for unknown level names."""
        assert configure_logging("chatty").level == logging.WARNING

    def test_numeric_level(self, package_logger):
        """Test that numeric levels are used as is."""
        assert configure_logging(logging.ERROR).level == logging.ERROR

    def test_handlers_replaced_on_reconfigure(self, package_logger):
        """Test that calling twice does not stack console handlers."""
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(package_logger.handlers) == 1

    def test_trace_mode_format(self, package_logger):
        """Test that trace mode includes the logger name."""
        configure_logging("DEBUG", trace_mode=True)
        assert "%(name)s" in package_logger.handlers[0].formatter._fmt

    def test_log_file(self, package_logger, tmp_path):
        """Test teeing log output to a file."""
        log_file = tmp_path / "adf2md.log"
        configure_logging("WARNING", log_file=str(log_file))
        assert len(package_logger.handlers) == 2

        logging.getLogger("adf2md.renderers.markdown").warning("Unsupported node type: futureBlock")
        for handler in package_logger.handlers:
            handler.flush()

        assert "Unsupported node type: futureBlock" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, package_logger, tmp_path):
        """Test that a log file that cannot be opened only costs the file handler."""
        configure_logging("WARNING", log_file=str(tmp_path / "missing" / "dir" / "x.log"))
        assert len(package_logger.handlers) == 1

    def test_console_stream(self, package_logger):
        """Test that records below the package logger reach the console stream."""
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)

        logging.getLogger("adf2md.parsers.adf").warning("Dropping 'blockquote' node")
        logging.getLogger("adf2md.parsers.adf").debug("not shown")

        assert stream.getvalue() == "WARNING: Dropping 'blockquote' node\n"
