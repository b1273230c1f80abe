# utils/logger.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Logging utility for sentence analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Mapping, Optional


class LogLevel(Enum):
    """Log levels for sentence analysis."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class VeritasLogger:
    """Centralized logger for sentence analysis with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the analyzer logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(VeritasFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (results and progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for analysis events
    def sentence_loaded(self, label: str, sentence: str, heading: str = "Expression"):
        """Log an echoed input sentence as "<heading> (<label>): <sentence>"."""
        self.info(f"{heading} ({label}): {sentence}")

    def query_result(self, query: str, result: bool):
        """Log the answer to one semantic query."""
        self.info(f"{query}: {str(result).lower()}")

    def enumeration_started(self, sentence: str, variable_count: int):
        """Log the start of a truth-table enumeration."""
        self.debug(
            f"Enumerating {1 << variable_count} assignments "
            f"over {variable_count} variables for: {sentence}"
        )

    def truth_table_row(self, assignment: Mapping[str, bool], value: bool):
        """Log one truth-table row as 'T F ... | T'."""
        cells = " ".join("T" if assignment[name] else "F" for name in assignment)
        self.info(f"  {cells} | {'T' if value else 'F'}")


class VeritasFormatter(logging.Formatter):
    """Custom formatter with clean output for results."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[VeritasLogger] = None


def get_logger(name: str = "veritas") -> VeritasLogger:
    """Get or create the global analyzer logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        VeritasLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VeritasLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Results are reported at INFO, so the quietest setting still shows them.

    Args:
        debug: Enable debug output
    """
    set_log_level(LogLevel.DEBUG if debug else LogLevel.INFO)
