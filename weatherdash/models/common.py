"""Common types and helpers shared across models."""

import math
from datetime import UTC, datetime
from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's round() uses banker's rounding; the dashboard does not.
    """
    return math.floor(value + 0.5)


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
