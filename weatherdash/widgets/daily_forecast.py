"""Seven-day forecast card strip widget."""

from functools import partial

from weatherdash.formatting.units import format_date, format_temperature
from weatherdash.formatting.weather_codes import describe_weather_code, icon_for_weather_code
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.weather import DailyForecast
from weatherdash.models.widget import (
    WidgetContent,
    WidgetDefinition,
    WidgetDescriptor,
    WidgetHeader,
    WidgetState,
)
from weatherdash.widgets.base import resolve_content

TITLE = "Daily Forecast"
DESCRIPTION = "7-day weather forecast"


def _header() -> WidgetHeader:
    return WidgetHeader(title=TITLE, description=DESCRIPTION)


def _populated(forecast: DailyForecast, unit: TemperatureUnit) -> WidgetContent:
    days = []
    for i, day in enumerate(forecast.time):
        code = forecast.weather_code[i]
        is_today = i == 0
        days.append({
            "date": day,
            "label": "Today" if is_today else format_date(day),
            "is_today": is_today,
            "icon": icon_for_weather_code(code),
            "description": describe_weather_code(code),
            "temperature_max": format_temperature(forecast.temperature_max[i], unit),
            "temperature_min": format_temperature(forecast.temperature_min[i], unit),
            "precipitation": f"{forecast.precipitation[i]:.1f}mm",
            "wind_speed": f"{forecast.wind_speed[i]}km/h",
        })
    return WidgetContent(state=WidgetState.POPULATED, body={"days": days})


def _content(
    forecast: DailyForecast | None,
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


def create_daily_forecast_widget(
    forecast: DailyForecast | None,
    loading: bool,
    error: str | None = None,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
) -> WidgetDescriptor:
    return WidgetDescriptor(
        title=TITLE,
        description=DESCRIPTION,
        icon="table",
        header=_header,
        content=partial(_content, forecast, loading, error, unit),
        definition=WidgetDefinition(default_row_span=3, default_column_span=2),
        static_min_height=320,
    )
