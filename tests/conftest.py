"""
Pytest configuration for the suggestions test suite.

This conftest.py provides:
- Quiet logging (suppresses console output)
- Candidate files and a CLI runner shared across the CLI tests
"""

import os

import pytest
from typer.testing import CliRunner

from suggestions.logging_config import setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep flag defaults from the environment out of the test run."""
    for name in ("SUGGESTIONS_SINGLE", "SUGGESTIONS_QUOTE", "SUGGESTIONS_JSON", "SUGGESTIONS_REQUIRED"):
        os.environ.pop(name, None)
    os.environ.setdefault("SUGGESTIONS_QUIET", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# CLI FIXTURES
# ============================================================================

@pytest.fixture
def runner():
    """Click test runner for invoking the typer app."""
    return CliRunner()


@pytest.fixture
def possible_values():
    """The possible values used throughout the examples."""
    return ["test", "possible", "values"]


@pytest.fixture
def candidates_file(tmp_path):
    """A candidates file with one value per line."""
    path = tmp_path / "candidates.txt"
    path.write_text("testing\ntempo\nthings\n", encoding="utf-8")
    return path
