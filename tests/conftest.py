"""
Pytest configuration for AirGuard engine tests.

Registers custom markers and provides shared fixtures.
"""

from datetime import datetime

import numpy as np
import pytest

from airguard.reading import Location, PollutantPanel, Reading


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def build_reading(
    pm2_5=10.0,
    pm10=20.0,
    no2=10.0,
    so2=2.0,
    o3=30.0,
    co=200.0,
    us_epa_index=1,
    wind_kph=20.0,
    humidity=40.0,
    temperature=20.0,
    latitude=51.52,
    longitude=-0.11,
    name="London",
):
    """Builds a Reading with clean-air defaults; override any field."""
    return Reading(
        location=Location(
            name=name,
            region="City of London, Greater London",
            country="United Kingdom",
            latitude=latitude,
            longitude=longitude,
        ),
        temperature=temperature,
        wind_kph=wind_kph,
        wind_degree=180,
        humidity=humidity,
        air_quality=PollutantPanel(
            co=co,
            no2=no2,
            o3=o3,
            so2=so2,
            pm2_5=pm2_5,
            pm10=pm10,
            us_epa_index=us_epa_index,
        ),
    )


@pytest.fixture
def make_reading():
    """Fixture providing the reading factory."""
    return build_reading


@pytest.fixture
def clean_reading():
    """Fixture providing a clean-air reading."""
    return build_reading()


@pytest.fixture
def rng():
    """Fixture providing a seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def noon():
    """Fixture providing a fixed reference time (12:00)."""
    return datetime(2025, 1, 15, 12, 0, 0)
