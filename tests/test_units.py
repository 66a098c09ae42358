# ABOUTME: Contract tests for temperature conversion and formatting.
# ABOUTME: Validates Celsius/Fahrenheit conversion points, reversibility and display strings.

import pytest

from weatherfinder.units import fahrenheit_to_celsius, format_temperature, to_display


class TestToDisplay:
    def test_celsius_passes_through(self):
        assert to_display(0, False) == 0
        assert to_display(-12.5, False) == -12.5

    def test_fixed_points_in_fahrenheit(self):
        """Freezing and boiling points convert to 32°F and 212°F.

        Implementation: Converts 0°C and 100°C with the Fahrenheit flag set.
        Passing implies: The conversion uses c * 9/5 + 32.
        """
        assert to_display(0, True) == 32
        assert to_display(100, True) == 212
        assert to_display(-40, True) == -40

    @pytest.mark.parametrize("celsius", [-40.0, -3.3, 0.0, 15.2, 37.0, 100.0])
    def test_conversion_is_reversible(self, celsius):
        assert fahrenheit_to_celsius(to_display(celsius, True)) == pytest.approx(celsius)


class TestFormatTemperature:
    def test_default_precision_is_one_decimal(self):
        assert format_temperature(15.2, False) == "15.2°C"
        assert format_temperature(15.0, False) == "15.0°C"

    def test_fahrenheit_symbol_and_value(self):
        """Formatting in Fahrenheit converts first and uses the °F symbol.

        Implementation: Formats 15°C with the Fahrenheit flag.
        Passing implies: Conversion happens before rounding and the unit symbol follows the flag.
        """
        assert format_temperature(15.0, True) == "59.0°F"

    def test_custom_precision(self):
        assert format_temperature(21.456, False, precision=0) == "21°C"
        assert format_temperature(21.456, False, precision=2) == "21.46°C"
