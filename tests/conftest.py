# ABOUTME: Shared test fixtures for the weather finder test suite.
# ABOUTME: Provides settings, canned Open-Meteo payloads and mock httpx client factories.

from unittest.mock import AsyncMock

import httpx
import pytest

from weatherfinder.city_lists import CityLists
from weatherfinder.config import Settings
from weatherfinder.deps import WeatherDeps
from weatherfinder.preferences import MemoryPreferences


def make_response(json_data, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response carrying the given JSON body."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


@pytest.fixture
def json_response():
    """Factory for real httpx.Response objects carrying a JSON body."""
    return make_response


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(prefs_path=tmp_path / "prefs.json")


@pytest.fixture
def mock_client():
    """Factory for a mock httpx.AsyncClient returning the given JSON bodies in order."""

    def _make(*json_bodies, status_code: int = 200) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        responses = [make_response(body, status_code) for body in json_bodies]
        if len(responses) == 1:
            mock.get.return_value = responses[0]
        else:
            mock.get.side_effect = responses
        return mock

    return _make


@pytest.fixture
def cities() -> CityLists:
    return CityLists(MemoryPreferences())


@pytest.fixture
def make_deps(settings):
    def _make(client: httpx.AsyncClient) -> WeatherDeps:
        return WeatherDeps(http_client=client, settings=settings)

    return _make


@pytest.fixture
def paris_geocode() -> dict:
    return {"results": [{"name": "Paris", "latitude": 48.85, "longitude": 2.35}]}


@pytest.fixture
def paris_forecast() -> dict:
    return {
        "current_weather": {"temperature": 15.2, "windspeed": 10, "weathercode": 1},
        "daily": {
            "time": ["2024-01-01"],
            "temperature_2m_max": [18],
            "temperature_2m_min": [10],
            "sunrise": ["2024-01-01T08:00"],
            "sunset": ["2024-01-01T17:00"],
            "weathercode": [1],
        },
    }


@pytest.fixture
def full_forecast() -> dict:
    """A forecast payload with all three blocks populated."""
    return {
        "current_weather": {"temperature": 3.4, "windspeed": 12.5, "weathercode": 71},
        "hourly": {
            "time": ["2025-01-15T00:00", "2025-01-15T01:00", "2025-01-15T02:00"],
            "temperature_2m": [2.1, 1.8, 1.5],
            "relativehumidity_2m": [81, 84, 86],
            "weathercode": [3, 71, 73],
        },
        "daily": {
            "time": ["2025-01-15", "2025-01-16", "2025-01-17", "2025-01-18", "2025-01-19"],
            "temperature_2m_max": [4.0, 5.5, 6.1, 2.0, 1.0],
            "temperature_2m_min": [-1.0, 0.5, 1.2, -3.3, -4.0],
            "sunrise": ["2025-01-15T08:45", "2025-01-16T08:44"],
            "sunset": ["2025-01-15T16:00", "2025-01-16T16:02"],
            "weathercode": [71, 3, 61, 0, 95],
        },
    }
