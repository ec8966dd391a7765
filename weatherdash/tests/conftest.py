"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.forecast_fetcher import map_forecast
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.weather import WeatherSnapshot

FIXTURE_DIR = Path(__file__).parent / "fixtures"

FORECAST_URL = "https://test-forecast.example.com/v1/forecast"
GEOCODING_URL = "https://test-geocoding.example.com/v1/search"
IP_GEOLOCATION_URL = "https://test-ipapi.example.com/json/"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def forecast_body() -> dict:
    return load_fixture("open_meteo_forecast_sf.json")


@pytest.fixture
def snapshot(forecast_body: dict) -> WeatherSnapshot:
    return map_forecast(forecast_body, 37.7749, -122.4194)


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient(forecast_url=FORECAST_URL, geocoding_url=GEOCODING_URL)


@pytest.fixture
def test_config() -> DashboardConfig:
    return DashboardConfig(
        api={"forecast_url": FORECAST_URL, "geocoding_url": GEOCODING_URL},
        geolocation={"provider_url": IP_GEOLOCATION_URL, "timeout_seconds": 1.0},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"forecast_url": FORECAST_URL, "geocoding_url": GEOCODING_URL},
        "geolocation": {"enabled": False},
        "default_location": {"name": "Berlin", "latitude": 52.52, "longitude": 13.405},
        "display": {"temperature_unit": "F"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
