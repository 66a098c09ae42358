# ABOUTME: Contract tests for the WMO weather code classifier.
# ABOUTME: Validates every documented code maps to its category and everything else is UNKNOWN.

import pytest

from weatherfinder.weather_codes import WeatherCategory, describe, icon_category, icon_glyph

TABLE = [
    ([0], WeatherCategory.CLEAR_SKY),
    ([1, 2, 3], WeatherCategory.CLOUDY),
    ([45, 48], WeatherCategory.FOG),
    ([51, 53, 55], WeatherCategory.DRIZZLE),
    ([56, 57], WeatherCategory.FREEZING_DRIZZLE),
    ([61, 63, 65], WeatherCategory.RAIN),
    ([66, 67], WeatherCategory.FREEZING_RAIN),
    ([71, 73, 75], WeatherCategory.SNOW),
    ([77], WeatherCategory.SNOW_GRAINS),
    ([80, 81, 82], WeatherCategory.RAIN_SHOWERS),
    ([85, 86], WeatherCategory.SNOW_SHOWERS),
    ([95, 96, 99], WeatherCategory.THUNDERSTORM),
]


class TestIconCategory:
    @pytest.mark.parametrize("codes,category", TABLE)
    def test_documented_codes(self, codes, category):
        for code in codes:
            assert icon_category(code) is category

    @pytest.mark.parametrize("code", [4, 12, 50, 60, 78, 90, 100, -1, 1000])
    def test_codes_outside_table_are_unknown(self, code):
        """Codes not in the WMO table classify as UNKNOWN.

        Implementation: Classifies gaps in the table, negatives and large values.
        Passing implies: The classifier never raises for unexpected codes.
        """
        assert icon_category(code) is WeatherCategory.UNKNOWN
        assert describe(code) == "Unknown"

    def test_non_integer_input_is_unknown(self):
        assert icon_category(None) is WeatherCategory.UNKNOWN
        assert icon_category("1") is WeatherCategory.UNKNOWN
        assert icon_category(True) is WeatherCategory.UNKNOWN


class TestDescribe:
    def test_labels(self):
        assert describe(0) == "Clear Sky"
        assert describe(1) == "Cloudy"
        assert describe(48) == "Fog"
        assert describe(67) == "Freezing Rain"
        assert describe(99) == "Thunderstorm"

    def test_describe_matches_category_label(self):
        for codes, category in TABLE:
            for code in codes:
                assert describe(code) == category.value


class TestIconGlyph:
    def test_every_category_has_a_glyph(self):
        for category in WeatherCategory:
            assert icon_glyph(category)
