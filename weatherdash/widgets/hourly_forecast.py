"""Hourly forecast line chart widget."""

from functools import partial

from weatherdash.formatting.units import convert_temperature, format_time
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.weather import HourlyForecast
from weatherdash.models.widget import (
    WidgetContent,
    WidgetDefinition,
    WidgetDescriptor,
    WidgetHeader,
    WidgetState,
)
from weatherdash.widgets.base import resolve_content

TITLE = "Hourly Forecast"
DESCRIPTION = "24-hour temperature and precipitation forecast"

TEMPERATURE_COLOR = "#2563eb"
PRECIPITATION_COLOR = "#059669"
Y_HEADROOM = 5
CHART_HEIGHT = 300


def _header() -> WidgetHeader:
    return WidgetHeader(title=TITLE, description=DESCRIPTION)


def _populated(forecast: HourlyForecast, unit: TemperatureUnit) -> WidgetContent:
    temperatures = [
        convert_temperature(t, TemperatureUnit.CELSIUS, unit)
        for t in forecast.temperature
    ]
    precipitation = list(forecast.precipitation)

    body = {
        "chart": "line",
        "height": CHART_HEIGHT,
        "series": [
            {
                "title": f"Temperature (°{TemperatureUnit(unit).value})",
                "type": "line",
                "color": TEMPERATURE_COLOR,
                "data": [{"x": t, "y": y} for t, y in zip(forecast.time, temperatures)],
            },
            {
                "title": "Precipitation (mm)",
                "type": "line",
                "color": PRECIPITATION_COLOR,
                "data": [{"x": t, "y": y} for t, y in zip(forecast.time, precipitation)],
            },
        ],
        "x_ticks": [format_time(t) for t in forecast.time],
        "x_domain": None,
        "y_domain": None,
    }
    if forecast.time:
        body["x_domain"] = [forecast.time[0], forecast.time[-1]]
        body["y_domain"] = [
            min(*temperatures, 0),
            max(*temperatures, *precipitation) + Y_HEADROOM,
        ]
    return WidgetContent(state=WidgetState.POPULATED, body=body)


def _content(
    forecast: HourlyForecast | None,
    loading: bool,
    error: str | None,
    unit: TemperatureUnit,
) -> WidgetContent:
    return resolve_content(
        forecast, loading, error,
        loading_message="Loading forecast data...",
        empty_message="No forecast data available",
        populate=partial(_populated, unit=unit),
    )


def create_hourly_forecast_widget(
    forecast: HourlyForecast | None,
    loading: bool,
    error: str | None = None,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
) -> WidgetDescriptor:
    return WidgetDescriptor(
        title=TITLE,
        description=DESCRIPTION,
        icon="lineChart",
        header=_header,
        content=partial(_content, forecast, loading, error, unit),
        definition=WidgetDefinition(
            default_row_span=4, default_column_span=2, min_row_span=3
        ),
        static_min_height=360,
    )
