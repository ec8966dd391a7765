"""Location and info widget, with refresh and unit toggle actions."""

from functools import partial

from weatherdash.formatting.units import format_coordinates, format_datetime
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.weather import WeatherSnapshot
from weatherdash.models.widget import (
    Intent,
    IntentKind,
    WidgetAction,
    WidgetContent,
    WidgetDefinition,
    WidgetDescriptor,
    WidgetHeader,
    WidgetState,
)
from weatherdash.widgets.base import resolve_content

TITLE = "Location & Info"
DESCRIPTION = "Current location and weather information"

REFRESH_INTENT = Intent(kind=IntentKind.REFRESH)
RELOAD_INTENT = Intent(kind=IntentKind.RELOAD)


def unit_toggle_action(unit: TemperatureUnit) -> WidgetAction:
    """Action switching the display to the other temperature unit."""
    target = (
        TemperatureUnit.FAHRENHEIT
        if unit == TemperatureUnit.CELSIUS
        else TemperatureUnit.CELSIUS
    )
    return WidgetAction(
        label=f"Show °{target.value}",
        intent=Intent(kind=IntentKind.SET_UNIT, unit=target),
    )


def _header() -> WidgetHeader:
    return WidgetHeader(title=TITLE, description=DESCRIPTION)


def _populated(
    snapshot: WeatherSnapshot,
    location_name: str,
    refresh_intent: Intent,
    unit: TemperatureUnit,
) -> WidgetContent:
    location = snapshot.location
    return WidgetContent(
        state=WidgetState.POPULATED,
        body={
            "location": location_name,
            "coordinates": format_coordinates(location.latitude, location.longitude),
            "timezone": location.timezone,
            "last_updated": format_datetime(snapshot.current.time),
            "temperature_unit": TemperatureUnit(unit).value,
        },
        actions=(
            WidgetAction(label="Refresh Location", intent=refresh_intent, icon="refresh"),
            unit_toggle_action(unit),
            WidgetAction(label="Reload Forecast", intent=RELOAD_INTENT, icon="refresh"),
        ),
    )


def _content(
    snapshot: WeatherSnapshot | None,
    loading: bool,
    error: str | None,
    location_name: str,
    refresh_intent: Intent,
    unit: TemperatureUnit,
) -> WidgetContent:
    return resolve_content(
        snapshot, loading, error,
        loading_message="Loading location data...",
        empty_message="No location data available",
        populate=partial(
            _populated,
            location_name=location_name,
            refresh_intent=refresh_intent,
            unit=unit,
        ),
        error_actions=(WidgetAction(label="Retry", intent=refresh_intent),),
        empty_actions=(WidgetAction(label="Get Location", intent=refresh_intent),),
    )


def create_weather_location_widget(
    snapshot: WeatherSnapshot | None,
    loading: bool,
    error: str | None,
    location_name: str,
    refresh_intent: Intent = REFRESH_INTENT,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
) -> WidgetDescriptor:
    return WidgetDescriptor(
        title=TITLE,
        description=DESCRIPTION,
        icon="settings",
        header=_header,
        content=partial(
            _content, snapshot, loading, error, location_name, refresh_intent, unit
        ),
        definition=WidgetDefinition(default_row_span=3, default_column_span=1),
    )
