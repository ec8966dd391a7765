"""Fallback location used when device geolocation is unavailable."""

from weatherdash.config.schema import LocationConfig
from weatherdash.models.location import Coordinate

DEFAULT_LOCATION = Coordinate(latitude=37.7749, longitude=-122.4194, name="San Francisco")


def default_coordinate(location: LocationConfig | None = None) -> Coordinate:
    """Coordinate for the configured fallback, or San Francisco when unset."""
    if location is None:
        return DEFAULT_LOCATION
    return Coordinate(
        latitude=location.latitude,
        longitude=location.longitude,
        name=location.name,
    )
