"""Dashboard state container and the pure transitions that replace it."""

from dataclasses import dataclass, replace

from weatherdash.models.common import TemperatureUnit
from weatherdash.models.location import Coordinate
from weatherdash.models.weather import WeatherSnapshot
from weatherdash.models.widget import WidgetDescriptor
from weatherdash.widgets import (
    create_current_weather_widget,
    create_daily_forecast_widget,
    create_hourly_forecast_widget,
    create_weather_location_widget,
)

UNKNOWN_LOCATION_NAME = "Unknown Location"


@dataclass(frozen=True)
class DashboardState:
    coordinate: Coordinate | None = None
    snapshot: WeatherSnapshot | None = None
    loading: bool = False
    error: str | None = None
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @property
    def location_name(self) -> str:
        return self.coordinate.name if self.coordinate is not None else UNKNOWN_LOCATION_NAME


def begin_action(state: DashboardState) -> DashboardState:
    return replace(state, loading=True, error=None)


def location_resolved(state: DashboardState, coordinate: Coordinate) -> DashboardState:
    return replace(state, coordinate=coordinate)


def snapshot_loaded(state: DashboardState, snapshot: WeatherSnapshot) -> DashboardState:
    return replace(state, snapshot=snapshot)


def action_failed(state: DashboardState, message: str) -> DashboardState:
    """Record an error. The previous snapshot is kept."""
    return replace(state, error=message)


def action_finished(state: DashboardState) -> DashboardState:
    return replace(state, loading=False)


def unit_changed(state: DashboardState, unit: TemperatureUnit) -> DashboardState:
    return replace(state, unit=TemperatureUnit(unit))


def build_widgets(state: DashboardState) -> list[WidgetDescriptor]:
    """Descriptors for the four dashboard widgets, in grid order."""
    snapshot = state.snapshot
    return [
        create_current_weather_widget(
            snapshot.current if snapshot else None, state.loading, state.error, state.unit
        ),
        create_weather_location_widget(
            snapshot, state.loading, state.error, state.location_name, unit=state.unit
        ),
        create_hourly_forecast_widget(
            snapshot.hourly if snapshot else None, state.loading, state.error, state.unit
        ),
        create_daily_forecast_widget(
            snapshot.daily if snapshot else None, state.loading, state.error, state.unit
        ),
    ]
