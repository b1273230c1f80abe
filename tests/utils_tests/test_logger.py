# tests/utils_tests/test_logger.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Test suite for the analyzer logger and its formatter

import io
import logging
import pytest
import utils.logger as logger_module
from utils.logger import LogLevel, VeritasFormatter, configure_logging, get_logger


class TestConsoleOutput:
    """Test cases for where the logger writes."""

    def test_output_reaches_buffer(self, console_output):
        get_logger().info("Valid: true")

        assert console_output.getvalue() == "Valid: true\n"

    def test_output_follows_replaced_stream(self, console_output):
        replacement = io.StringIO()
        for handler in get_logger().logger.handlers:
            handler.setStream(replacement)

        get_logger().sentence_loaded("E1", "p & q")

        assert replacement.getvalue() == "Expression (E1): p & q\n"
        assert console_output.getvalue() == ""

    def test_new_logger_binds_current_stdout(self, console_output, monkeypatch):
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdout", stdout)
        monkeypatch.setattr(logger_module, "_global_logger", None)

        get_logger().query_result("Contingent", False)

        assert stdout.getvalue() == "Contingent: false\n"

    def test_single_handler_without_propagation(self, console_output):
        logger = get_logger().logger

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_global_logger_is_shared(self, console_output):
        assert get_logger() is get_logger()


class TestLevels:
    """Test cases for level configuration."""

    def test_debug_hidden_by_default(self, console_output):
        configure_logging()
        get_logger().debug("internal state")

        assert console_output.getvalue() == ""

    def test_debug_prefixed_when_enabled(self, console_output):
        configure_logging(debug=True)
        get_logger().debug("internal state")

        assert console_output.getvalue() == "[DEBUG] internal state\n"

    def test_set_level_updates_handlers(self, console_output):
        get_logger().set_level(LogLevel.WARNING)

        assert all(h.level == logging.WARNING for h in get_logger().logger.handlers)


class TestFormatter:
    """Test cases for the result formatter."""

    def _record(self, level: int, message: str) -> logging.LogRecord:
        return logging.LogRecord("veritas", level, __file__, 1, message, None, None)

    @pytest.mark.parametrize(
        "level, expected",
        [
            (logging.INFO, "E1 entails E2: true"),
            (logging.WARNING, "E1 entails E2: true"),
            (logging.ERROR, "E1 entails E2: true"),
            (logging.DEBUG, "[DEBUG] E1 entails E2: true"),
        ],
    )
    def test_format(self, level, expected):
        assert VeritasFormatter().format(self._record(level, "E1 entails E2: true")) == expected

    def test_truth_table_row(self, console_output):
        get_logger().truth_table_row({"p": True, "q": False}, True)

        assert console_output.getvalue() == "  T F | T\n"

    def test_second_sentence_heading(self, console_output):
        get_logger().sentence_loaded("E2", "q", heading="Second Expression")

        assert console_output.getvalue() == "Second Expression (E2): q\n"
