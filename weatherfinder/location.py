# ABOUTME: Resolves city names to coordinates and coordinates to display names.
# ABOUTME: Name lookups fail hard on no match; coordinate lookups fall back to a placeholder name.

import logging

import httpx

from weatherfinder.config import Settings
from weatherfinder.deps import get_json
from weatherfinder.errors import LocationNotFoundError, TransportError
from weatherfinder.models import Coordinate, ResolvedLocation

logger = logging.getLogger(__name__)

CURRENT_LOCATION_NAME = "Current Location"


async def resolve_by_name(client: httpx.AsyncClient, city_name: str, settings: Settings) -> ResolvedLocation:
    """Geocode a city name to its best match using the Open-Meteo geocoding API.

    The caller must pass a non-blank name.

    Raises:
        LocationNotFoundError: The search returned no results.
        TransportError: The request failed or the result could not be read.
    """
    data = await get_json(client, settings.geocoding_url, {"name": city_name, "count": 1})

    results = data.get("results")
    if not results:
        logger.info("No geocoding match for %r", city_name)
        raise LocationNotFoundError(city_name)

    try:
        r = results[0]
        return ResolvedLocation(
            display_name=r["name"],
            coordinate=Coordinate(latitude=r["latitude"], longitude=r["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"Malformed geocoding result for {city_name!r}") from e


async def resolve_by_coordinates(
    client: httpx.AsyncClient, coordinate: Coordinate, settings: Settings
) -> ResolvedLocation:
    """Reverse-geocode a coordinate to a display name.

    An empty result is not an error: the coordinate is still usable for the
    forecast, so the name falls back to "Current Location".
    """
    data = await get_json(
        client,
        settings.reverse_geocoding_url,
        {"latitude": coordinate.latitude, "longitude": coordinate.longitude, "count": 1},
    )

    name = CURRENT_LOCATION_NAME
    results = data.get("results")
    if results is not None and not (isinstance(results, list) and all(isinstance(r, dict) for r in results)):
        raise TransportError("Malformed reverse geocoding results")
    first = results[0].get("name") if results else None
    if isinstance(first, str) and first:
        name = first
    else:
        logger.debug("Reverse geocoding gave no name for %s, %s", coordinate.latitude, coordinate.longitude)
    return ResolvedLocation(display_name=name, coordinate=coordinate)
