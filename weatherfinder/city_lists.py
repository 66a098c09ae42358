# ABOUTME: Bounded most-recent-first city lists (recents and favorites) and the unit preference.
# ABOUTME: Pure list operations plus a CityLists store that persists every change immediately.

from weatherfinder.preferences import PreferenceStore

RECENT_KEY = "recentCities"
FAVORITE_KEY = "favoriteCities"
FAHRENHEIT_KEY = "isFahrenheit"

RECENT_LIMIT = 5
FAVORITE_LIMIT = 10


def record(cities: list[str], name: str, max_len: int) -> None:
    """Move `name` to the front of `cities` and drop entries beyond `max_len`."""
    remove(cities, name)
    cities.insert(0, name)
    del cities[max_len:]


def remove(cities: list[str], name: str) -> None:
    """Remove every occurrence of `name`."""
    cities[:] = [c for c in cities if c != name]


def toggle(cities: list[str], name: str, max_len: int) -> bool:
    """Remove `name` if present, otherwise record it. Returns membership afterwards."""
    if name in cities:
        remove(cities, name)
        return False
    record(cities, name, max_len)
    return True


def _normalized(cities: list[str], max_len: int) -> list[str]:
    """Drop repeated names (keeping the first) and entries beyond `max_len`."""
    return list(dict.fromkeys(cities))[:max_len]


class CityLists:
    """Recent and favorite cities plus the Fahrenheit flag, backed by a preference store."""

    def __init__(self, store: PreferenceStore):
        self.store = store
        self.recent: list[str] = _normalized(store.get_string_list(RECENT_KEY), RECENT_LIMIT)
        self.favorites: list[str] = _normalized(store.get_string_list(FAVORITE_KEY), FAVORITE_LIMIT)

    def record_recent(self, name: str) -> None:
        record(self.recent, name, RECENT_LIMIT)
        self.store.set_string_list(RECENT_KEY, self.recent)

    def remove_recent(self, name: str) -> None:
        remove(self.recent, name)
        self.store.set_string_list(RECENT_KEY, self.recent)

    def toggle_favorite(self, name: str) -> bool:
        added = toggle(self.favorites, name, FAVORITE_LIMIT)
        self.store.set_string_list(FAVORITE_KEY, self.favorites)
        return added

    def is_favorite(self, name: str) -> bool:
        return name in self.favorites

    @property
    def is_fahrenheit(self) -> bool:
        return self.store.get_bool(FAHRENHEIT_KEY)

    def set_fahrenheit(self, value: bool) -> None:
        self.store.set_bool(FAHRENHEIT_KEY, value)
