"""Pytest configuration and shared fixtures for the jiramark test suite."""

import os
import shlex
import sys

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def python_filter_command():
    """Build a filter command line that runs a Python snippet on the input file.

    The returned callable takes Python source which receives the input file
    path as ``sys.argv[1]``.
    """

    def _build(source: str) -> str:
        return f"{shlex.quote(sys.executable)} -c {shlex.quote(source)}"

    return _build
