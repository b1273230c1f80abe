# tests/conftest.py
# This file is part of Veritas - A Propositional Logic Analyzer
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Veritas tests.

This module provides pytest configuration and fixtures shared by the test
packages. It ensures the project root is importable and offers a buffer
that collects the logger's console output.
"""

import io
import logging
import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import syntax
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def console_output(monkeypatch):
    """Route the global logger's console output into an in-memory buffer.

    A new global logger is created for the test and its console handler is
    pointed at a StringIO, so results can be read back regardless of how
    pytest manages sys.stdout. The shared logger's handlers and level are
    restored afterwards.

    Yields:
        io.StringIO: Everything the logger printed during the test
    """
    import utils.logger as logger_module

    shared = logging.getLogger("veritas")
    saved_handlers = list(shared.handlers)
    saved_level = shared.level

    monkeypatch.setattr(logger_module, "_global_logger", None)
    buffer = io.StringIO()
    for handler in logger_module.get_logger().logger.handlers:
        handler.setStream(buffer)

    yield buffer

    shared.handlers[:] = saved_handlers
    shared.setLevel(saved_level)


@pytest.fixture
def tautology():
    """Provide a sentence true under every assignment."""
    return "p | ~p"


@pytest.fixture
def contradiction():
    """Provide a sentence false under every assignment."""
    return "p & ~p"


@pytest.fixture
def contingency():
    """Provide a sentence true under some assignments only."""
    return "p & q"
