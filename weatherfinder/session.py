# ABOUTME: Orchestrates one fetch cycle (resolve, fetch, build) and owns the screen state.
# ABOUTME: Each action returns an immutable state; stale completions never overwrite newer requests.

import itertools
import logging
from collections.abc import Callable
from typing import Protocol

from weatherfinder.builder import build_report
from weatherfinder.city_lists import CityLists
from weatherfinder.deps import WeatherDeps
from weatherfinder.errors import (
    ForecastDecodeError,
    LocationNotFoundError,
    LocationUnavailableError,
    WeatherFinderError,
)
from weatherfinder.forecast import fetch_forecast
from weatherfinder.location import resolve_by_coordinates, resolve_by_name
from weatherfinder.models import Coordinate, Failed, Idle, Loaded, Loading, ResolvedLocation, ScreenState, WeatherReport

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_MESSAGE = "City not found"
GENERIC_FAILURE_MESSAGE = "Something went wrong"
LOCATION_FAILURE_MESSAGE = "Could not detect location weather."


class LocationProvider(Protocol):
    """Device-location boundary. Raises LocationUnavailableError when no fix is possible."""

    async def current_position(self) -> Coordinate: ...


class FixedLocationProvider:
    """Location provider that always reports the same coordinate."""

    def __init__(self, coordinate: Coordinate):
        self.coordinate = coordinate

    async def current_position(self) -> Coordinate:
        return self.coordinate


class WeatherSession:
    """Screen-level controller for weather lookups.

    Every call to search/locate takes a ticket. When a call finishes, its result
    is committed only if no newer call has started in the meantime, so an old
    slow response cannot replace a newer one.
    """

    def __init__(self, deps: WeatherDeps, cities: CityLists):
        self.deps = deps
        self.cities = cities
        self.state: ScreenState = Idle()
        self._tickets = itertools.count(1)
        self._latest = 0
        self._listeners: list[Callable[[ScreenState], None]] = []

    def subscribe(self, listener: Callable[[ScreenState], None]) -> Callable[[], None]:
        """Register a callback for committed states. Returns a function that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def search(self, city_name: str, save_city: bool = True) -> ScreenState:
        """Look up weather by city name and record the canonical name in recents."""
        city = city_name.strip()
        if not city:
            return self.state

        ticket = self._begin()
        try:
            location = await resolve_by_name(self.deps.http_client, city, self.deps.settings)
            report = await self._fetch_report(location)
        except LocationNotFoundError:
            logger.info("City %r not found", city)
            return self._commit(ticket, Failed(kind="not_found", message=CITY_NOT_FOUND_MESSAGE))
        except WeatherFinderError as e:
            logger.exception("Weather lookup for %r failed", city)
            return self._commit(ticket, Failed(kind=_kind(e), message=GENERIC_FAILURE_MESSAGE))
        except Exception:
            logger.exception("Unexpected error looking up %r", city)
            return self._commit(ticket, Failed(kind="transport", message=GENERIC_FAILURE_MESSAGE))

        if save_city:
            self.cities.record_recent(location.display_name)
        return self._commit(ticket, Loaded(report=report))

    async def locate(self, coordinate: Coordinate) -> ScreenState:
        """Look up weather for a coordinate. Recents are left untouched."""
        ticket = self._begin()
        try:
            location = await resolve_by_coordinates(self.deps.http_client, coordinate, self.deps.settings)
            report = await self._fetch_report(location)
        except WeatherFinderError as e:
            logger.exception("Weather lookup for %s, %s failed", coordinate.latitude, coordinate.longitude)
            return self._commit(ticket, Failed(kind=_kind(e), message=LOCATION_FAILURE_MESSAGE))
        except Exception:
            logger.exception("Unexpected error looking up %s, %s", coordinate.latitude, coordinate.longitude)
            return self._commit(ticket, Failed(kind="transport", message=LOCATION_FAILURE_MESSAGE))
        return self._commit(ticket, Loaded(report=report))

    async def start(self, location_provider: LocationProvider | None = None) -> ScreenState:
        """App-start flow: use the device location if possible, else the default city."""
        default_city = self.deps.settings.default_city
        if location_provider is None:
            return await self.search(default_city, save_city=False)
        try:
            coordinate = await location_provider.current_position()
        except LocationUnavailableError as e:
            logger.info("Device location unavailable (%s), falling back to %s", e, default_city)
            return await self.search(default_city, save_city=False)
        return await self.locate(coordinate)

    async def _fetch_report(self, location: ResolvedLocation) -> WeatherReport:
        payload = await fetch_forecast(self.deps.http_client, location.coordinate, self.deps.settings)
        return build_report(payload, location.display_name)

    def _begin(self) -> int:
        ticket = next(self._tickets)
        self._latest = ticket
        self._commit(ticket, Loading())
        return ticket

    def _commit(self, ticket: int, state: ScreenState) -> ScreenState:
        if ticket != self._latest:
            logger.debug("Discarding result of request %d, request %d is newer", ticket, self._latest)
            return self.state
        self.state = state
        for listener in list(self._listeners):
            listener(state)
        return state


def _kind(error: WeatherFinderError) -> str:
    return "decode" if isinstance(error, ForecastDecodeError) else "transport"
