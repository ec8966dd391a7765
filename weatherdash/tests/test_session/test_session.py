"""Tests for the dashboard session actions."""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import ForecastHttpError, LocationNotFound, SearchTransportError
from weatherdash.ingest.forecast_fetcher import ForecastFetcher
from weatherdash.ingest.geolocation import IpGeolocator
from weatherdash.ingest.location_resolver import LocationResolver
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.location import Coordinate
from weatherdash.models.weather import WeatherSnapshot
from weatherdash.models.widget import Intent, IntentKind
from weatherdash.session import DashboardSession
from weatherdash.tests.conftest import (
    FORECAST_URL,
    GEOCODING_URL,
    IP_GEOLOCATION_URL,
    load_fixture,
)

SF = Coordinate(37.7749, -122.4194, "San Francisco")
BERLIN = Coordinate(52.52437, 13.41053, "Berlin, Germany")


@pytest.fixture
def resolver() -> MagicMock:
    resolver = MagicMock(spec=LocationResolver)
    resolver.resolve_location.return_value = SF
    resolver.search_location_by_name.return_value = BERLIN
    return resolver


@pytest.fixture
def fetcher(snapshot: WeatherSnapshot) -> MagicMock:
    fetcher = MagicMock(spec=ForecastFetcher)
    fetcher.fetch.return_value = snapshot
    return fetcher


@pytest.fixture
def session(resolver: MagicMock, fetcher: MagicMock) -> DashboardSession:
    return DashboardSession(resolver, fetcher)


class TestLoad:
    def test_success(self, session: DashboardSession, fetcher: MagicMock, snapshot):
        state = asyncio.run(session.load())
        assert state.coordinate == SF
        assert state.snapshot is snapshot
        assert state.loading is False
        assert state.error is None
        fetcher.fetch.assert_called_once_with(37.7749, -122.4194)

    def test_fetch_failure_sets_error(self, session: DashboardSession, fetcher: MagicMock):
        fetcher.fetch.side_effect = ForecastHttpError(500)

        state = asyncio.run(session.load())
        assert state.error == "Weather API error: 500"
        assert state.loading is False
        assert state.snapshot is None
        # Location was still resolved before the fetch failed
        assert state.coordinate == SF

    def test_failure_keeps_previous_snapshot(
        self, session: DashboardSession, fetcher: MagicMock, snapshot
    ):
        asyncio.run(session.load())
        fetcher.fetch.side_effect = ForecastHttpError(503)

        state = asyncio.run(session.load())
        assert state.snapshot is snapshot
        assert state.error == "Weather API error: 503"

    def test_success_clears_previous_error(self, session: DashboardSession, fetcher: MagicMock):
        fetcher.fetch.side_effect = ForecastHttpError(500)
        asyncio.run(session.load())

        fetcher.fetch.side_effect = None
        state = asyncio.run(session.load())
        assert state.error is None

    def test_refresh_reresolves(self, session: DashboardSession, resolver: MagicMock):
        asyncio.run(session.load())
        asyncio.run(session.refresh())
        assert resolver.resolve_location.call_count == 2


class TestSearch:
    def test_success(self, session: DashboardSession, fetcher: MagicMock):
        state = asyncio.run(session.search("Berlin"))
        assert state.coordinate == BERLIN
        assert state.location_name == "Berlin, Germany"
        fetcher.fetch.assert_called_once_with(52.52437, 13.41053)

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_is_noop(self, session: DashboardSession, resolver: MagicMock, query):
        before = session.state
        state = asyncio.run(session.search(query))
        assert state is before
        resolver.search_location_by_name.assert_not_called()

    def test_not_found(self, session: DashboardSession, resolver: MagicMock, fetcher: MagicMock):
        asyncio.run(session.load())
        resolver.search_location_by_name.side_effect = LocationNotFound()

        state = asyncio.run(session.search("Nowhereville"))
        assert state.error == "Location not found"
        assert state.loading is False
        # Previous location and forecast remain
        assert state.coordinate == SF
        assert fetcher.fetch.call_count == 1

    def test_transport_failure(self, session: DashboardSession, resolver: MagicMock):
        resolver.search_location_by_name.side_effect = SearchTransportError()

        state = asyncio.run(session.search("Berlin"))
        assert state.error == "Failed to search location"


class TestReload:
    def test_keeps_searched_place(
        self, session: DashboardSession, resolver: MagicMock, fetcher: MagicMock
    ):
        asyncio.run(session.search("Berlin"))

        state = asyncio.run(session.reload())
        assert state.coordinate == BERLIN
        assert state.error is None
        assert state.loading is False
        resolver.resolve_location.assert_not_called()
        assert fetcher.fetch.call_count == 2
        fetcher.fetch.assert_called_with(52.52437, 13.41053)

    def test_without_location_resolves_first(
        self, session: DashboardSession, resolver: MagicMock, fetcher: MagicMock
    ):
        state = asyncio.run(session.reload())
        assert state.coordinate == SF
        resolver.resolve_location.assert_called_once()
        fetcher.fetch.assert_called_once_with(37.7749, -122.4194)

    def test_failure_keeps_snapshot_and_place(
        self, session: DashboardSession, fetcher: MagicMock, snapshot
    ):
        asyncio.run(session.search("Berlin"))
        fetcher.fetch.side_effect = ForecastHttpError(502)

        state = asyncio.run(session.reload())
        assert state.error == "Weather API error: 502"
        assert state.coordinate == BERLIN
        assert state.snapshot is snapshot


class TestUnit:
    def test_set_unit(self, session: DashboardSession, fetcher: MagicMock):
        state = session.set_unit(TemperatureUnit.FAHRENHEIT)
        assert state.unit == TemperatureUnit.FAHRENHEIT
        fetcher.fetch.assert_not_called()

    def test_initial_unit(self, resolver: MagicMock, fetcher: MagicMock):
        session = DashboardSession(resolver, fetcher, unit=TemperatureUnit.FAHRENHEIT)
        assert session.state.unit == TemperatureUnit.FAHRENHEIT


class TestDispatch:
    def test_refresh(self, session: DashboardSession, resolver: MagicMock):
        asyncio.run(session.dispatch(Intent(kind=IntentKind.REFRESH)))
        resolver.resolve_location.assert_called_once()

    def test_reload(self, session: DashboardSession, resolver: MagicMock):
        asyncio.run(session.search("Berlin"))
        state = asyncio.run(session.dispatch(Intent(kind=IntentKind.RELOAD)))
        assert state.coordinate == BERLIN
        resolver.resolve_location.assert_not_called()

    def test_search(self, session: DashboardSession, resolver: MagicMock):
        state = asyncio.run(session.dispatch(Intent(kind=IntentKind.SEARCH, query="Berlin")))
        resolver.search_location_by_name.assert_called_once_with("Berlin")
        assert state.coordinate == BERLIN

    def test_set_unit(self, session: DashboardSession):
        intent = Intent(kind=IntentKind.SET_UNIT, unit=TemperatureUnit.FAHRENHEIT)
        state = asyncio.run(session.dispatch(intent))
        assert state.unit == TemperatureUnit.FAHRENHEIT

    def test_set_unit_without_unit(self, session: DashboardSession):
        with pytest.raises(ValueError, match="requires a unit"):
            asyncio.run(session.dispatch(Intent(kind=IntentKind.SET_UNIT)))

    def test_widget_action_round_trip(self, session: DashboardSession):
        asyncio.run(session.load())
        location_widget = session.widgets()[1]
        toggle = location_widget.content().actions[1]

        state = asyncio.run(session.dispatch(toggle.intent))
        assert state.unit == TemperatureUnit.FAHRENHEIT


class TestFromConfig:
    def test_wires_configuration(self, test_config: DashboardConfig):
        session = DashboardSession.from_config(test_config)
        assert session.resolver.client.forecast_url == FORECAST_URL
        assert session.resolver.client.geocoding_url == GEOCODING_URL
        assert isinstance(session.resolver.geolocator, IpGeolocator)
        assert session.resolver.geolocation_timeout == 1.0
        assert session.fetcher.client is session.resolver.client

    def test_geolocation_disabled(self, test_config: DashboardConfig):
        config = test_config.model_copy(
            update={"geolocation": test_config.geolocation.model_copy(update={"enabled": False})}
        )
        session = DashboardSession.from_config(config)
        assert session.resolver.geolocator is None

    @respx.mock
    def test_load_end_to_end(self, test_config: DashboardConfig):
        respx.get(IP_GEOLOCATION_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("ipapi_response.json"))
        )
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("open_meteo_forecast_sf.json"))
        )
        session = DashboardSession.from_config(test_config)

        state = asyncio.run(session.load())
        assert state.coordinate == Coordinate(45.5234, -122.6762, "Current Location")
        assert state.snapshot.location.latitude == 45.5234
        assert state.error is None

    @respx.mock
    def test_load_geolocation_failure_uses_default(self, test_config: DashboardConfig):
        respx.get(IP_GEOLOCATION_URL).mock(return_value=httpx.Response(403))
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("open_meteo_forecast_sf.json"))
        )
        session = DashboardSession.from_config(test_config)

        state = asyncio.run(session.load())
        assert state.coordinate == SF
        assert state.error is None

    @pytest.mark.parametrize("body", [[], {"results": {"name": "x"}}])
    @respx.mock
    def test_search_wrong_shaped_geocoding_body(self, test_config: DashboardConfig, body):
        respx.get(GEOCODING_URL).mock(return_value=httpx.Response(200, json=body))
        session = DashboardSession.from_config(test_config)

        state = asyncio.run(session.search("Berlin"))
        assert state.error == "Failed to search location"
        assert state.loading is False
        assert state.coordinate is None
