"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import date
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.vineyard_etc.models import WeatherObservation, Location  # noqa: E402


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_request(fixtures_dir):
    """Load a calculation request in the farm management input format."""
    request_file = fixtures_dir / "sample_request.json"
    with open(request_file) as f:
        return json.load(f)


@pytest.fixture
def hot_day():
    """Hot, dry pre-monsoon day in a Maharashtra vineyard."""
    return WeatherObservation(
        date=date(2024, 5, 15),
        temperature_max=35.0,
        temperature_min=22.0,
        humidity=45.0,
        wind_speed=2.5,
        rainfall=0.0,
        solar_radiation=24.0
    )


@pytest.fixture
def vineyard():
    """Vineyard location at 500 m elevation."""
    return Location(latitude=19.1, longitude=74.7, elevation=500.0)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
