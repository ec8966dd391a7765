"""WMO weather interpretation codes as reported by Open-Meteo."""

from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN_DESCRIPTION = "Unknown"
UNKNOWN_ICON = "❓"
UNKNOWN_SEVERITY = "warning"


@dataclass(frozen=True)
class WeatherCodeEntry:
    description: str
    icon: str
    severity: str  # "success" | "warning" | "error"


WEATHER_CODES = MappingProxyType({
    0: WeatherCodeEntry("Clear sky", "☀️", "success"),
    1: WeatherCodeEntry("Mainly clear", "🌤️", "success"),
    2: WeatherCodeEntry("Partly cloudy", "⛅", "success"),
    3: WeatherCodeEntry("Overcast", "☁️", "warning"),
    45: WeatherCodeEntry("Fog", "🌫️", "warning"),
    48: WeatherCodeEntry("Depositing rime fog", "🌫️", "warning"),
    51: WeatherCodeEntry("Light drizzle", "🌦️", "warning"),
    53: WeatherCodeEntry("Moderate drizzle", "🌦️", "warning"),
    55: WeatherCodeEntry("Dense drizzle", "🌧️", "warning"),
    56: WeatherCodeEntry("Light freezing drizzle", "🌨️", "warning"),
    57: WeatherCodeEntry("Dense freezing drizzle", "🌨️", "error"),
    61: WeatherCodeEntry("Slight rain", "🌧️", "warning"),
    63: WeatherCodeEntry("Moderate rain", "🌧️", "error"),
    65: WeatherCodeEntry("Heavy rain", "🌧️", "error"),
    66: WeatherCodeEntry("Light freezing rain", "🌨️", "error"),
    67: WeatherCodeEntry("Heavy freezing rain", "🌨️", "error"),
    71: WeatherCodeEntry("Slight snow fall", "🌨️", "warning"),
    73: WeatherCodeEntry("Moderate snow fall", "❄️", "error"),
    75: WeatherCodeEntry("Heavy snow fall", "❄️", "error"),
    77: WeatherCodeEntry("Snow grains", "❄️", "warning"),
    80: WeatherCodeEntry("Slight rain showers", "🌦️", "warning"),
    81: WeatherCodeEntry("Moderate rain showers", "🌧️", "error"),
    82: WeatherCodeEntry("Violent rain showers", "⛈️", "error"),
    85: WeatherCodeEntry("Slight snow showers", "🌨️", "warning"),
    86: WeatherCodeEntry("Heavy snow showers", "❄️", "error"),
    95: WeatherCodeEntry("Thunderstorm", "⛈️", "error"),
    96: WeatherCodeEntry("Thunderstorm with slight hail", "⛈️", "error"),
    99: WeatherCodeEntry("Thunderstorm with heavy hail", "⛈️", "error"),
})


def describe_weather_code(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    return entry.description if entry is not None else UNKNOWN_DESCRIPTION


def icon_for_weather_code(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    return entry.icon if entry is not None else UNKNOWN_ICON


def severity_for_weather_code(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    return entry.severity if entry is not None else UNKNOWN_SEVERITY
