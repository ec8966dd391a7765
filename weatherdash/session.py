"""Dashboard session: runs user actions and swaps the state atomically.

Each action resolves a location and/or fetches a forecast, then replaces
the session state through the pure transitions in weatherdash.state.
Concurrent actions are allowed; whichever settles last wins.
"""

import logging

from weatherdash.config.defaults import default_coordinate
from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import WeatherDashError
from weatherdash.ingest.forecast_fetcher import ForecastFetcher
from weatherdash.ingest.geolocation import IpGeolocator
from weatherdash.ingest.location_resolver import LocationResolver
from weatherdash.ingest.open_meteo_client import OpenMeteoClient
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.location import Coordinate
from weatherdash.models.widget import Intent, IntentKind, WidgetDescriptor
from weatherdash.state import (
    DashboardState,
    action_failed,
    action_finished,
    begin_action,
    build_widgets,
    location_resolved,
    snapshot_loaded,
    unit_changed,
)

logger = logging.getLogger(__name__)


class DashboardSession:
    def __init__(
        self,
        resolver: LocationResolver,
        fetcher: ForecastFetcher,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.state = DashboardState(unit=unit)

    @classmethod
    def from_config(cls, config: DashboardConfig) -> "DashboardSession":
        client = OpenMeteoClient(
            forecast_url=config.api.forecast_url,
            geocoding_url=config.api.geocoding_url,
            timeout=config.api.timeout_seconds,
            user_agent=config.api.user_agent,
            forecast_days=config.api.forecast_days,
        )
        geolocator = None
        if config.geolocation.enabled:
            geolocator = IpGeolocator(
                url=config.geolocation.provider_url,
                timeout=config.geolocation.timeout_seconds,
                user_agent=config.api.user_agent,
            )
        resolver = LocationResolver(
            client,
            geolocator=geolocator,
            default=default_coordinate(config.default_location),
            geolocation_timeout=config.geolocation.timeout_seconds,
        )
        return cls(resolver, ForecastFetcher(client), unit=config.display.temperature_unit)

    async def load(self) -> DashboardState:
        """Resolve the device location, then fetch its forecast."""
        self.state = begin_action(self.state)
        try:
            coordinate = await self.resolver.resolve_location()
            self.state = location_resolved(self.state, coordinate)
            await self._fetch(coordinate)
        except WeatherDashError as e:
            logger.error("Failed to load weather data: %s", e)
            self.state = action_failed(self.state, str(e) or "Failed to load weather data")
        finally:
            self.state = action_finished(self.state)
        return self.state

    async def refresh(self) -> DashboardState:
        """Re-resolve the location and reload, like the location panel's refresh."""
        return await self.load()

    async def reload(self) -> DashboardState:
        """Re-fetch the forecast for the current coordinate, searched or not.

        Resolves a location first when none has been chosen yet.
        """
        coordinate = self.state.coordinate
        if coordinate is None:
            return await self.load()

        self.state = begin_action(self.state)
        try:
            await self._fetch(coordinate)
        except WeatherDashError as e:
            logger.error("Failed to reload weather for %s: %s", coordinate.name, e)
            self.state = action_failed(self.state, str(e) or "Failed to load weather data")
        finally:
            self.state = action_finished(self.state)
        return self.state

    async def search(self, query: str) -> DashboardState:
        """Geocode a place name, switch to it and fetch its forecast.

        Blank queries leave the state untouched.
        """
        if not query or not query.strip():
            return self.state

        self.state = begin_action(self.state)
        try:
            coordinate = await self.resolver.search_location_by_name(query)
            if coordinate is not None:
                self.state = location_resolved(self.state, coordinate)
                await self._fetch(coordinate)
        except WeatherDashError as e:
            logger.error("Location search for %r failed: %s", query, e)
            self.state = action_failed(self.state, str(e) or "Failed to search location")
        finally:
            self.state = action_finished(self.state)
        return self.state

    def set_unit(self, unit: TemperatureUnit) -> DashboardState:
        self.state = unit_changed(self.state, unit)
        return self.state

    async def dispatch(self, intent: Intent) -> DashboardState:
        """Run the action a widget asked for."""
        if intent.kind == IntentKind.REFRESH:
            return await self.refresh()
        if intent.kind == IntentKind.RELOAD:
            return await self.reload()
        if intent.kind == IntentKind.SEARCH:
            return await self.search(intent.query or "")
        if intent.kind == IntentKind.SET_UNIT:
            if intent.unit is None:
                raise ValueError("set_unit intent requires a unit")
            return self.set_unit(intent.unit)
        raise ValueError(f"Unknown intent: {intent.kind}")

    def widgets(self) -> list[WidgetDescriptor]:
        return build_widgets(self.state)

    async def _fetch(self, coordinate: Coordinate) -> None:
        snapshot = await self.fetcher.fetch(coordinate.latitude, coordinate.longitude)
        self.state = snapshot_loaded(self.state, snapshot)
