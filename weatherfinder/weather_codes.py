# ABOUTME: Maps WMO weather interpretation codes from Open-Meteo to categories and labels.
# ABOUTME: Unknown or out-of-table codes always classify as UNKNOWN instead of raising.

from enum import Enum


class WeatherCategory(str, Enum):
    """Sky/precipitation condition; the value is the human-readable label."""

    CLEAR_SKY = "Clear Sky"
    CLOUDY = "Cloudy"
    FOG = "Fog"
    DRIZZLE = "Drizzle"
    FREEZING_DRIZZLE = "Freezing Drizzle"
    RAIN = "Rain"
    FREEZING_RAIN = "Freezing Rain"
    SNOW = "Snow"
    SNOW_GRAINS = "Snow Grains"
    RAIN_SHOWERS = "Rain Showers"
    SNOW_SHOWERS = "Snow Showers"
    THUNDERSTORM = "Thunderstorm"
    UNKNOWN = "Unknown"


_CODE_TABLE: dict[int, WeatherCategory] = {
    0: WeatherCategory.CLEAR_SKY,
    1: WeatherCategory.CLOUDY,
    2: WeatherCategory.CLOUDY,
    3: WeatherCategory.CLOUDY,
    45: WeatherCategory.FOG,
    48: WeatherCategory.FOG,
    51: WeatherCategory.DRIZZLE,
    53: WeatherCategory.DRIZZLE,
    55: WeatherCategory.DRIZZLE,
    56: WeatherCategory.FREEZING_DRIZZLE,
    57: WeatherCategory.FREEZING_DRIZZLE,
    61: WeatherCategory.RAIN,
    63: WeatherCategory.RAIN,
    65: WeatherCategory.RAIN,
    66: WeatherCategory.FREEZING_RAIN,
    67: WeatherCategory.FREEZING_RAIN,
    71: WeatherCategory.SNOW,
    73: WeatherCategory.SNOW,
    75: WeatherCategory.SNOW,
    77: WeatherCategory.SNOW_GRAINS,
    80: WeatherCategory.RAIN_SHOWERS,
    81: WeatherCategory.RAIN_SHOWERS,
    82: WeatherCategory.RAIN_SHOWERS,
    85: WeatherCategory.SNOW_SHOWERS,
    86: WeatherCategory.SNOW_SHOWERS,
    95: WeatherCategory.THUNDERSTORM,
    96: WeatherCategory.THUNDERSTORM,
    99: WeatherCategory.THUNDERSTORM,
}

_GLYPHS: dict[WeatherCategory, str] = {
    WeatherCategory.CLEAR_SKY: "☀",
    WeatherCategory.CLOUDY: "☁",
    WeatherCategory.FOG: "≡",
    WeatherCategory.DRIZZLE: "☂",
    WeatherCategory.FREEZING_DRIZZLE: "☂",
    WeatherCategory.RAIN: "☔",
    WeatherCategory.FREEZING_RAIN: "☔",
    WeatherCategory.SNOW: "❄",
    WeatherCategory.SNOW_GRAINS: "❄",
    WeatherCategory.RAIN_SHOWERS: "☔",
    WeatherCategory.SNOW_SHOWERS: "❄",
    WeatherCategory.THUNDERSTORM: "⚡",
    WeatherCategory.UNKNOWN: "?",
}


def icon_category(code: int) -> WeatherCategory:
    """Classify a weather code. Anything outside the WMO table is UNKNOWN."""
    if isinstance(code, bool) or not isinstance(code, int):
        return WeatherCategory.UNKNOWN
    return _CODE_TABLE.get(code, WeatherCategory.UNKNOWN)


def describe(code: int) -> str:
    """Human-readable description of a weather code, e.g. 'Cloudy'."""
    return icon_category(code).value


def icon_glyph(category: WeatherCategory) -> str:
    return _GLYPHS.get(category, "?")
