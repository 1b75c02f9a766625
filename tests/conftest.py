"""
Pytest configuration and fixtures for money-cycle-mcp tests.
"""

from datetime import date
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def data_path() -> Path:
    """Path to the fixture data file with cards and plans."""
    return Path(__file__).parent / "fixtures" / "data.json"


@pytest.fixture
def fixed_today() -> date:
    """Reference date used by tests that pin the clock explicitly."""
    return date(2026, 10, 18)
