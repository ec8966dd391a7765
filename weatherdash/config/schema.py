"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherdash.models.common import TemperatureUnit

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
IP_GEOLOCATION_URL = "https://ipapi.co/json/"
DEFAULT_USER_AGENT = "weatherdash/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_url: str = FORECAST_URL
    geocoding_url: str = GEOCODING_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    forecast_days: int = Field(default=7, ge=1, le=16)


class GeolocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    provider_url: str = IP_GEOLOCATION_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "San Francisco"
    latitude: float = Field(default=37.7749, ge=-90.0, le=90.0)
    longitude: float = Field(default=-122.4194, ge=-180.0, le=180.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    geolocation: GeolocationConfig = GeolocationConfig()
    default_location: LocationConfig = LocationConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
