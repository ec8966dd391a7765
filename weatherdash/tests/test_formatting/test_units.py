"""Tests for temperature conversion and display formatting."""

from weatherdash.formatting.units import (
    convert_temperature,
    format_coordinates,
    format_date,
    format_datetime,
    format_temperature,
    format_time,
    wind_direction_label,
)
from weatherdash.models.common import TemperatureUnit, round_half_up

C = TemperatureUnit.CELSIUS
F = TemperatureUnit.FAHRENHEIT


class TestConvertTemperature:
    def test_celsius_to_fahrenheit(self):
        assert convert_temperature(20, C, F) == 68

    def test_fahrenheit_to_celsius(self):
        assert convert_temperature(32, F, C) == 0

    def test_same_unit_is_identity(self):
        assert convert_temperature(21.6, C, C) == 21.6
        assert convert_temperature(70.3, F, F) == 70.3

    def test_minus_forty_meets(self):
        assert convert_temperature(-40, C, F) == -40
        assert convert_temperature(-40, F, C) == -40

    def test_result_is_rounded(self):
        # 37°C = 98.6°F
        assert convert_temperature(37, C, F) == 99
        # 100°F = 37.78°C
        assert convert_temperature(100, F, C) == 38

    def test_halves_round_up(self):
        # 2.5°C = 36.5°F exactly
        assert convert_temperature(2.5, C, F) == 37

    def test_round_trip_within_one_degree(self):
        # Integer rounding on each leg makes the round trip lossy
        for x in range(-60, 61):
            back = convert_temperature(convert_temperature(x, C, F), F, C)
            assert abs(back - x) <= 1, x

    def test_accepts_plain_strings(self):
        assert convert_temperature(20, "C", "F") == 68


class TestRoundHalfUp:
    def test_positive_half(self):
        assert round_half_up(21.5) == 22
        assert round_half_up(22.5) == 23

    def test_negative_half_rounds_toward_positive(self):
        assert round_half_up(-2.5) == -2

    def test_plain_rounding(self):
        assert round_half_up(21.6) == 22
        assert round_half_up(21.4) == 21


class TestFormatTemperature:
    def test_celsius(self):
        assert format_temperature(20, C) == "20°C"

    def test_celsius_is_rounded(self):
        assert format_temperature(21.6, C) == "22°C"

    def test_fahrenheit_converts(self):
        assert format_temperature(20, F) == "68°F"

    def test_default_unit_is_celsius(self):
        assert format_temperature(-3) == "-3°C"


class TestTimeFormatting:
    def test_format_time(self):
        assert format_time("2024-06-01T14:00") == "14:00"

    def test_format_time_midnight(self):
        assert format_time("2024-06-02T00:00") == "00:00"

    def test_format_date(self):
        assert format_date("2024-06-03") == "Mon, Jun 3"

    def test_format_date_from_timestamp(self):
        assert format_date("2024-12-25T08:00") == "Wed, Dec 25"

    def test_format_datetime(self):
        assert format_datetime("2024-06-01T14:00") == "2024-06-01 14:00"


class TestWindDirectionLabel:
    def test_cardinal_points(self):
        assert wind_direction_label(0) == "N"
        assert wind_direction_label(90) == "E"
        assert wind_direction_label(180) == "S"
        assert wind_direction_label(270) == "W"

    def test_intercardinal(self):
        assert wind_direction_label(225) == "SW"
        assert wind_direction_label(45) == "NE"

    def test_wraps_to_north(self):
        assert wind_direction_label(350) == "N"
        assert wind_direction_label(359) == "N"

    def test_boundary_rounds_clockwise(self):
        assert wind_direction_label(22.5) == "NE"


class TestFormatCoordinates:
    def test_four_decimals(self):
        assert format_coordinates(37.7749, -122.4194) == "37.7749°, -122.4194°"

    def test_pads_short_values(self):
        assert format_coordinates(52.5, 13.4) == "52.5000°, 13.4000°"
