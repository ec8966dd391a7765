"""Domain errors raised by the location resolver and the forecast fetcher."""


class WeatherDashError(Exception):
    """Base class for every error surfaced to the dashboard."""


class GeolocationUnavailable(WeatherDashError):
    """Device geolocation failed, was denied, timed out or is absent.

    Always absorbed by the resolver, which falls back to the default location.
    """


class LocationNotFound(WeatherDashError):
    def __init__(self, message: str = "Location not found"):
        super().__init__(message)


class SearchTransportError(WeatherDashError):
    def __init__(self, message: str = "Failed to search location"):
        super().__init__(message)


class ForecastError(WeatherDashError):
    """Base class for forecast fetch failures."""


class ForecastHttpError(ForecastError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Weather API error: {status_code}")


class ForecastTransportError(ForecastError):
    def __init__(self, message: str = "Failed to load weather data"):
        super().__init__(message)


class ForecastDecodeError(ForecastError):
    """The forecast body was not JSON or lacked a required field."""
