# ABOUTME: Contract tests for the JSON-file preference store.
# ABOUTME: Validates defaults, round trips through disk and recovery from corrupt files.

import json

from weatherfinder.preferences import JsonPreferences, MemoryPreferences


class TestMemoryPreferences:
    def test_defaults(self):
        prefs = MemoryPreferences()
        assert prefs.get_string_list("recentCities") == []
        assert prefs.get_bool("isFahrenheit") is False

    def test_ignores_wrongly_typed_values(self):
        prefs = MemoryPreferences({"recentCities": "Paris", "isFahrenheit": "yes"})
        assert prefs.get_string_list("recentCities") == []
        assert prefs.get_bool("isFahrenheit") is False


class TestJsonPreferences:
    def test_missing_file_starts_empty(self, tmp_path):
        prefs = JsonPreferences(tmp_path / "nested" / "prefs.json")
        assert prefs.get_string_list("favoriteCities") == []

    def test_writes_json_object(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        prefs = JsonPreferences(path)
        prefs.set_string_list("favoriteCities", ["Rome", "Oslo"])
        prefs.set_bool("isFahrenheit", True)

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "favoriteCities": ["Rome", "Oslo"],
            "isFahrenheit": True,
        }
        assert list(path.parent.glob(".prefs-*")) == []

    def test_corrupt_file_is_treated_as_empty(self, tmp_path):
        """A file that is not valid JSON does not stop the app from starting.

        Implementation: Writes garbage, opens the store, then writes a value.
        Passing implies: Reads fall back to defaults and the next write replaces the file.
        """
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")

        prefs = JsonPreferences(path)
        assert prefs.get_string_list("recentCities") == []

        prefs.set_string_list("recentCities", ["Paris"])
        assert JsonPreferences(path).get_string_list("recentCities") == ["Paris"]

    def test_non_object_file_is_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonPreferences(path).get_bool("isFahrenheit") is False
