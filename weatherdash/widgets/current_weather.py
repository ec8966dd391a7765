"""Current conditions widget."""

from functools import partial

from weatherdash.formatting.units import format_temperature, wind_direction_label
from weatherdash.formatting.weather_codes import (
    describe_weather_code,
    icon_for_weather_code,
    severity_for_weather_code,
)
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.weather import CurrentWeather
from weatherdash.models.widget import (
    WidgetContent,
    WidgetDefinition,
    WidgetDescriptor,
    WidgetHeader,
    WidgetState,
)
from weatherdash.widgets.base import resolve_content

TITLE = "Current Weather"
DESCRIPTION = "Current weather conditions"


def _header() -> WidgetHeader:
    return WidgetHeader(title=TITLE, description=DESCRIPTION)


def _populated(weather: CurrentWeather, unit: TemperatureUnit) -> WidgetContent:
    feels_like = None
    if weather.apparent_temperature is not None:
        feels_like = format_temperature(weather.apparent_temperature, unit)
    return WidgetContent(
        state=WidgetState.POPULATED,
        body={
            "icon": icon_for_weather_code(weather.weather_code),
            "temperature": format_temperature(weather.temperature, unit),
            "description": describe_weather_code(weather.weather_code),
            "severity": severity_for_weather_code(weather.weather_code),
            "feels_like": feels_like,
            "wind_speed": f"{weather.wind_speed} km/h",
            "humidity": f"{weather.humidity}%",
            "precipitation": f"{weather.precipitation} mm",
            "wind_direction": f"{weather.wind_direction}°",
            "wind_cardinal": wind_direction_label(weather.wind_direction),
        },
    )


def _content(
    weather: CurrentWeather | None,
    loading: bool,
    error: str | None,
    unit: TemperatureUnit,
) -> WidgetContent:
    return resolve_content(
        weather, loading, error,
        loading_message="Loading weather data...",
        empty_message="No weather data available",
        populate=partial(_populated, unit=unit),
    )


def create_current_weather_widget(
    weather: CurrentWeather | None,
    loading: bool,
    error: str | None = None,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
) -> WidgetDescriptor:
    return WidgetDescriptor(
        title=TITLE,
        description=DESCRIPTION,
        icon="list",
        header=_header,
        content=partial(_content, weather, loading, error, unit),
        definition=WidgetDefinition(default_row_span=3, default_column_span=1),
    )
