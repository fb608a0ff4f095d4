"""Pytest configuration and shared fixtures for the textdiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user configuration files and TEXTDIFF_CONFIG out of tests.

    The working directory and home directory point at an empty temporary
    directory so config discovery finds nothing unless a test writes a file.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.delenv("TEXTDIFF_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def sample_text() -> str:
    """Provide a short multi-paragraph document.

    Returns
    -------
    str
        Sample text used across multiple tests.

    """
    return """Release Notes

Version 2.1 adds line comparison.
Whitespace handling was improved.

Known issues:
- Large files are slow
- Tabs render as spaces
"""


@pytest.fixture
def long_document() -> list[str]:
    """Provide one hundred distinct lines."""
    return [f"line {i}" for i in range(1, 101)]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging during CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
