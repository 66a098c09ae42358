# ABOUTME: Exception hierarchy for location lookup, forecast retrieval and decoding.
# ABOUTME: Low-level httpx and JSON errors are wrapped into these before reaching the session.


class WeatherFinderError(Exception):
    """Base class for every failure that ends a fetch cycle."""


class LocationNotFoundError(WeatherFinderError):
    """The geocoding search returned no match for the requested name."""

    def __init__(self, city_name: str):
        super().__init__(f"Could not find location: {city_name}")
        self.city_name = city_name


class TransportError(WeatherFinderError):
    """A request failed on the network, returned an error status, or could not be decoded."""


class ForecastDecodeError(WeatherFinderError):
    """The forecast payload is missing a required field or holds a malformed value."""


class LocationUnavailableError(WeatherFinderError):
    """The device location could not be obtained (service off or permission denied)."""
