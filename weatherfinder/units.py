# ABOUTME: Temperature conversion and formatting for display.
# ABOUTME: All weather values are stored in Celsius; conversion happens only at render time.


def to_display(celsius: float, use_fahrenheit: bool) -> float:
    """Convert a Celsius value to the unit the user prefers."""
    return celsius * 9 / 5 + 32 if use_fahrenheit else celsius


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def unit_symbol(use_fahrenheit: bool) -> str:
    return "°F" if use_fahrenheit else "°C"


def format_temperature(celsius: float, use_fahrenheit: bool, precision: int = 1) -> str:
    """Format a Celsius value as e.g. '15.2°C' or '59.4°F'."""
    return f"{to_display(celsius, use_fahrenheit):.{precision}f}{unit_symbol(use_fahrenheit)}"
