"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def power_response(fixtures_dir):
    """Load a sample NASA POWER daily point response."""
    data_file = fixtures_dir / "power_response.json"
    with open(data_file, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def power_dataset(power_response):
    """Parameter block of the sample response (parameter code -> {YYYYMMDD: value})."""
    return power_response["properties"]["parameter"]


def daily_series(values, start="20230101"):
    """Build a {YYYYMMDD: value} mapping of consecutive days starting at start."""
    from datetime import datetime, timedelta

    first = datetime.strptime(start, "%Y%m%d")
    return {
        (first + timedelta(days=offset)).strftime("%Y%m%d"): value
        for offset, value in enumerate(values)
    }


@pytest.fixture
def make_series():
    """Factory for consecutive daily series."""
    return daily_series


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
