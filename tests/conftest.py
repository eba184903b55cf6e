"""
Shared fixtures for store, API and client tests.
"""

import pytest
from fastapi.testclient import TestClient

from aqstore.main import app, get_store
from aqstore.models import AirQualityUpdatePayload, WeatherConditions
from aqstore.store import AirQualityStore


@pytest.fixture
def store():
    return AirQualityStore()


@pytest.fixture
def make_payload():
    """Build a payload with sensible defaults; keyword arguments override fields."""

    def _make(**overrides):
        data = {
            "location": "Lakeview District",
            "air_quality_index": 42,
            "pollutant_levels": {"PM2.5": 35.0, "PM10": 50.0},
            "weather": WeatherConditions(temperature=21.5, humidity=60.0, wind_speed=3.2),
            "health_recommendations": ["Limit outdoor exercise", "Keep windows closed"],
            "timestamp": 100,
        }
        data.update(overrides)
        return AirQualityUpdatePayload(**data)

    return _make


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
