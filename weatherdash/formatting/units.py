"""Unit conversion and display formatting for temperatures, times and wind."""

from datetime import datetime

from weatherdash.models.common import TemperatureUnit, round_half_up

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def convert_temperature(
    value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit
) -> float:
    """Convert between Celsius and Fahrenheit, rounding to a whole degree.

    Identical units return the value untouched. The conversion is lossy:
    converting C to F and back may differ from the input by one degree.
    """
    if from_unit == to_unit:
        return value
    if from_unit == TemperatureUnit.CELSIUS and to_unit == TemperatureUnit.FAHRENHEIT:
        return round_half_up(value * 9 / 5 + 32)
    if from_unit == TemperatureUnit.FAHRENHEIT and to_unit == TemperatureUnit.CELSIUS:
        return round_half_up((value - 32) * 5 / 9)
    return value


def format_temperature(value: float, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> str:
    """Render a Celsius reading in the requested display unit, e.g. '68°F'."""
    display = convert_temperature(value, TemperatureUnit.CELSIUS, unit)
    return f"{round_half_up(display)}°{TemperatureUnit(unit).value}"


def format_time(iso_string: str) -> str:
    """Short clock time, e.g. '14:00'."""
    return datetime.fromisoformat(iso_string).strftime("%H:%M")


def format_date(iso_string: str) -> str:
    """Short weekday date, e.g. 'Mon, Jan 15'."""
    dt = datetime.fromisoformat(iso_string)
    return f"{dt:%a}, {dt:%b} {dt.day}"


def format_datetime(iso_string: str) -> str:
    return datetime.fromisoformat(iso_string).strftime("%Y-%m-%d %H:%M")


def wind_direction_label(degrees: float) -> str:
    """Nearest of the eight compass points for a bearing in degrees."""
    return COMPASS_POINTS[round_half_up(degrees / 45) % 8]


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.4f}°, {longitude:.4f}°"
