"""Forecast fetcher: retrieves Open-Meteo forecasts and maps them into snapshots."""

import logging

import httpx

from weatherdash.errors import ForecastDecodeError, ForecastHttpError, ForecastTransportError
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.common import round_half_up
from weatherdash.models.weather import (
    HOURLY_WINDOW,
    CurrentWeather,
    DailyForecast,
    HourlyForecast,
    LocationInfo,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    async def fetch(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Fetch and normalize the forecast for a coordinate.

        Raises ForecastHttpError on a non-2xx status, ForecastTransportError
        on network faults and ForecastDecodeError on malformed bodies.
        """
        try:
            raw = await self.client.get_forecast(latitude, longitude)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Forecast API error %d for %s,%s", status, latitude, longitude)
            raise ForecastHttpError(status) from e
        except httpx.RequestError as e:
            logger.error("Forecast request failed for %s,%s: %s", latitude, longitude, e)
            raise ForecastTransportError() from e
        except ValueError as e:
            logger.error("Forecast body is not JSON for %s,%s", latitude, longitude)
            raise ForecastDecodeError(f"Invalid forecast response: {e}") from e

        snapshot = map_forecast(raw, latitude, longitude)
        logger.info(
            "Fetched forecast for %s,%s: %d°C, %d hourly, %d daily",
            latitude, longitude, snapshot.current.temperature,
            len(snapshot.hourly), len(snapshot.daily),
        )
        return snapshot


def map_forecast(raw: dict, latitude: float, longitude: float) -> WeatherSnapshot:
    """Reshape a raw forecast body into a WeatherSnapshot.

    Latitude and longitude are echoed from the request, not read back from
    the response, since the provider snaps them to its grid.
    """
    try:
        return WeatherSnapshot(
            current=_map_current(raw["current"]),
            hourly=_map_hourly(raw["hourly"]),
            daily=_map_daily(raw["daily"]),
            location=LocationInfo(
                latitude=latitude,
                longitude=longitude,
                timezone=raw["timezone"],
            ),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ForecastDecodeError(f"Invalid forecast response: {e!r}") from e


def _map_current(current: dict) -> CurrentWeather:
    apparent = current.get("apparent_temperature")
    return CurrentWeather(
        temperature=round_half_up(current["temperature_2m"]),
        weather_code=current["weather_code"],
        wind_speed=round_half_up(current["wind_speed_10m"]),
        wind_direction=current["wind_direction_10m"],
        humidity=current["relative_humidity_2m"],
        precipitation=current["precipitation"],
        time=current["time"],
        apparent_temperature=round_half_up(apparent) if apparent is not None else None,
    )


def _map_hourly(hourly: dict) -> HourlyForecast:
    window = slice(0, HOURLY_WINDOW)
    return HourlyForecast(
        time=tuple(hourly["time"][window]),
        temperature=tuple(round_half_up(t) for t in hourly["temperature_2m"][window]),
        precipitation=tuple(hourly["precipitation"][window]),
        weather_code=tuple(hourly["weather_code"][window]),
        wind_speed=tuple(round_half_up(s) for s in hourly["wind_speed_10m"][window]),
    )


def _map_daily(daily: dict) -> DailyForecast:
    return DailyForecast(
        time=tuple(daily["time"]),
        temperature_max=tuple(round_half_up(t) for t in daily["temperature_2m_max"]),
        temperature_min=tuple(round_half_up(t) for t in daily["temperature_2m_min"]),
        weather_code=tuple(daily["weather_code"]),
        precipitation=tuple(daily["precipitation_sum"]),
        wind_speed=tuple(round_half_up(s) for s in daily["wind_speed_10m_max"]),
    )


async def fetch_weather_data(
    latitude: float, longitude: float, client: OpenMeteoClient | None = None
) -> WeatherSnapshot:
    """One-shot fetch with a default client."""
    return await ForecastFetcher(client or OpenMeteoClient()).fetch(latitude, longitude)
