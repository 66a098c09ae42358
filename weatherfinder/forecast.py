# ABOUTME: Fetches current, hourly and daily weather from the Open-Meteo forecast API.
# ABOUTME: Returns the decoded payload verbatim; normalization happens in the builder.

import httpx

from weatherfinder.config import Settings
from weatherfinder.deps import get_json
from weatherfinder.models import Coordinate

HOURLY_PARAMS = "temperature_2m,relativehumidity_2m,weathercode"
DAILY_PARAMS = "temperature_2m_max,temperature_2m_min,sunrise,sunset,weathercode"


async def fetch_forecast(client: httpx.AsyncClient, coordinate: Coordinate, settings: Settings) -> dict:
    """Fetch the raw forecast payload for a coordinate, in the location's own timezone."""
    return await get_json(
        client,
        settings.forecast_url,
        {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "current_weather": "true",
            "hourly": HOURLY_PARAMS,
            "daily": DAILY_PARAMS,
            "timezone": "auto",
        },
    )
