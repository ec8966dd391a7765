"""Open-Meteo forecast and geocoding API client."""

import logging

import httpx

from weatherdash.config.schema import DEFAULT_USER_AGENT, FORECAST_URL, GEOCODING_URL

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
)
HOURLY_FIELDS = ("temperature_2m", "precipitation", "weather_code", "wind_speed_10m")
DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_sum",
    "wind_speed_10m_max",
)


class OpenMeteoClient:
    def __init__(
        self,
        forecast_url: str = FORECAST_URL,
        geocoding_url: str = GEOCODING_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        forecast_days: int = 7,
    ):
        self.forecast_url = forecast_url
        self.geocoding_url = geocoding_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.forecast_days = forecast_days

    def forecast_params(self, latitude: float, longitude: float) -> dict[str, str]:
        """The fixed parameter set sent with every forecast request."""
        return {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "temperature_unit": "celsius",
            "wind_speed_unit": "kmh",
            "precipitation_unit": "mm",
            "timezone": "auto",
            "forecast_days": str(self.forecast_days),
        }

    async def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch current, hourly and daily forecast for a coordinate.

        Raises httpx.HTTPStatusError on a non-2xx response and
        httpx.RequestError on transport faults.
        """
        params = self.forecast_params(latitude, longitude)
        async with httpx.AsyncClient(
            headers={"User-Agent": self.user_agent}, timeout=self.timeout
        ) as client:
            resp = await client.get(self.forecast_url, params=params)
        logger.debug(
            "Forecast %s,%s returned %d", latitude, longitude, resp.status_code
        )
        resp.raise_for_status()
        return resp.json()

    async def search(self, name: str, count: int = 1) -> list[dict]:
        """Look up places by name. Returns an empty list when nothing matches."""
        params = {"name": name, "count": str(count)}
        async with httpx.AsyncClient(
            headers={"User-Agent": self.user_agent}, timeout=self.timeout
        ) as client:
            resp = await client.get(self.geocoding_url, params=params)
        logger.debug("Geocoding %r returned %d", name, resp.status_code)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"geocoding body is {type(data).__name__}, expected object")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ValueError(f"geocoding results is {type(results).__name__}, expected list")
        return results
