"""Forecast data models: one snapshot per successful fetch."""

from dataclasses import dataclass

HOURLY_WINDOW = 24


@dataclass(frozen=True)
class CurrentWeather:
    temperature: int
    weather_code: int
    wind_speed: int
    wind_direction: int  # degrees, 0-359
    humidity: int  # percent
    precipitation: float  # mm
    time: str  # ISO-8601, provider local time
    apparent_temperature: int | None = None


@dataclass(frozen=True)
class HourlyForecast:
    time: tuple[str, ...]
    temperature: tuple[int, ...]
    precipitation: tuple[float, ...]
    weather_code: tuple[int, ...]
    wind_speed: tuple[int, ...]

    def __post_init__(self) -> None:
        lengths = {
            len(self.time),
            len(self.temperature),
            len(self.precipitation),
            len(self.weather_code),
            len(self.wind_speed),
        }
        if len(lengths) != 1:
            raise ValueError(f"hourly sequences differ in length: {sorted(lengths)}")
        if len(self.time) > HOURLY_WINDOW:
            raise ValueError(
                f"hourly forecast holds {len(self.time)} entries, max {HOURLY_WINDOW}"
            )

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class DailyForecast:
    time: tuple[str, ...]
    temperature_max: tuple[int, ...]
    temperature_min: tuple[int, ...]
    weather_code: tuple[int, ...]
    precipitation: tuple[float, ...]
    wind_speed: tuple[int, ...]

    def __post_init__(self) -> None:
        lengths = {
            len(self.time),
            len(self.temperature_max),
            len(self.temperature_min),
            len(self.weather_code),
            len(self.precipitation),
            len(self.wind_speed),
        }
        if len(lengths) != 1:
            raise ValueError(f"daily sequences differ in length: {sorted(lengths)}")

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class LocationInfo:
    latitude: float
    longitude: float
    timezone: str


@dataclass(frozen=True)
class WeatherSnapshot:
    current: CurrentWeather
    hourly: HourlyForecast
    daily: DailyForecast
    location: LocationInfo
