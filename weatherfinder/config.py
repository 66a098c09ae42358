# ABOUTME: Runtime settings for the weather finder, read from environment variables.
# ABOUTME: A local .env file is loaded first so developers can override endpoints and paths.

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
REVERSE_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/reverse"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

DEFAULT_CITY = "Mumbai"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PREFS_PATH = Path.home() / ".weather_finder" / "prefs.json"


class Settings(BaseModel):
    """Endpoints, timeouts and storage locations used by one process."""

    geocoding_url: str = GEOCODING_URL
    reverse_geocoding_url: str = REVERSE_GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = DEFAULT_TIMEOUT
    default_city: str = DEFAULT_CITY
    prefs_path: Path = DEFAULT_PREFS_PATH
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build Settings from WEATHER_* environment variables, falling back to defaults."""
    load_dotenv()
    return Settings(
        geocoding_url=os.environ.get("WEATHER_GEOCODING_URL", GEOCODING_URL),
        reverse_geocoding_url=os.environ.get("WEATHER_REVERSE_GEOCODING_URL", REVERSE_GEOCODING_URL),
        forecast_url=os.environ.get("WEATHER_FORECAST_URL", FORECAST_URL),
        http_timeout=os.environ.get("WEATHER_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
        default_city=os.environ.get("WEATHER_DEFAULT_CITY", DEFAULT_CITY),
        prefs_path=os.environ.get("WEATHER_PREFS_PATH", DEFAULT_PREFS_PATH),
        log_level=os.environ.get("WEATHER_LOG_LEVEL", "WARNING"),
    )
