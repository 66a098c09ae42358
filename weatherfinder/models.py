# ABOUTME: Pydantic BaseModels for resolved locations, normalized weather and screen state.
# ABOUTME: Every weather record is rebuilt per fetch cycle and replaces the previous one.

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class ResolvedLocation(BaseModel):
    """A coordinate together with the name shown to the user."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    coordinate: Coordinate


class CurrentConditions(BaseModel):
    """Snapshot of the weather right now at one location."""

    location_name: str
    temperature_celsius: float
    wind_speed_kmh: float
    weather_code: int = 0
    humidity_percent: int | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None


class DailyForecastEntry(BaseModel):
    """One day of the daily series. min/max are kept exactly as received."""

    date: date
    min_temp_celsius: float
    max_temp_celsius: float
    weather_code: int


class HourlyForecastEntry(BaseModel):
    """One hour of the hourly series."""

    timestamp: datetime
    temperature_celsius: float
    weather_code: int


class WeatherReport(BaseModel):
    """Everything one fetch cycle produces for a location."""

    current: CurrentConditions
    daily: list[DailyForecastEntry] = []
    hourly: list[HourlyForecastEntry] = []


ErrorKind = Literal["not_found", "transport", "decode"]


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Loaded(BaseModel):
    """A fetch cycle finished and produced a full report."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loaded"] = "loaded"
    report: WeatherReport


class Failed(BaseModel):
    """A fetch cycle ended in an error. No partial data is kept."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    kind: ErrorKind
    message: str


ScreenState = Annotated[Idle | Loading | Loaded | Failed, Field(discriminator="status")]
