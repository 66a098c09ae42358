# ABOUTME: Dependency container for the weather session using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and settings, plus the JSON GET helper.

import logging

import httpx
from pydantic import BaseModel, ConfigDict

from weatherfinder.config import Settings
from weatherfinder.errors import TransportError

logger = logging.getLogger(__name__)


class WeatherDeps(BaseModel):
    """Collaborators injected into the session and the resolver/fetcher calls."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with a bounded timeout.

    Failed requests are not retried; the user re-triggers the action instead.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))


async def get_json(client: httpx.AsyncClient, url: str, params: dict) -> dict:
    """GET a JSON object, wrapping network, status and decode failures in TransportError."""
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise TransportError(f"Request to {url} failed: {e}") from e
    except ValueError as e:
        logger.warning("Response from %s is not valid JSON", url)
        raise TransportError(f"Invalid JSON from {url}") from e

    if not isinstance(data, dict):
        raise TransportError(f"Expected a JSON object from {url}, got {type(data).__name__}")
    return data
