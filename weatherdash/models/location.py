"""Resolved geographic position."""

from dataclasses import dataclass

CURRENT_LOCATION_NAME = "Current Location"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float
    name: str
