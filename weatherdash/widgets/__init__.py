from weatherdash.widgets.current_weather import create_current_weather_widget
from weatherdash.widgets.daily_forecast import create_daily_forecast_widget
from weatherdash.widgets.hourly_forecast import create_hourly_forecast_widget
from weatherdash.widgets.weather_location import create_weather_location_widget

__all__ = [
    "create_current_weather_widget",
    "create_daily_forecast_widget",
    "create_hourly_forecast_widget",
    "create_weather_location_widget",
]
