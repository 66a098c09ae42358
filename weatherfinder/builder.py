# ABOUTME: Normalizes raw Open-Meteo forecast payloads into typed weather records.
# ABOUTME: Column-oriented arrays are zipped into rows, truncated to the shortest column.

import logging
import math
from datetime import date, datetime

from weatherfinder.errors import ForecastDecodeError
from weatherfinder.models import CurrentConditions, DailyForecastEntry, HourlyForecastEntry, WeatherReport

logger = logging.getLogger(__name__)


def build_report(payload: dict, location_name: str) -> WeatherReport:
    """Decode a whole forecast payload in one step.

    Raises ForecastDecodeError if any required field is missing or malformed;
    no partial report is ever returned.
    """
    if not isinstance(payload, dict):
        raise ForecastDecodeError(f"Forecast payload must be an object, got {type(payload).__name__}")
    return WeatherReport(
        current=build_current(payload, location_name),
        daily=build_daily(payload),
        hourly=build_hourly(payload),
    )


def build_current(payload: dict, location_name: str) -> CurrentConditions:
    """Build the current-conditions snapshot.

    Humidity is taken from the first hourly value rather than the value for the
    current hour. Matching the hourly time column against "now" would be more
    accurate but changes what users see, so it is kept as is.
    """
    block = payload.get("current_weather")
    if not isinstance(block, dict):
        raise ForecastDecodeError("Forecast payload has no current_weather block")

    code = block.get("weathercode")
    return CurrentConditions(
        location_name=location_name,
        temperature_celsius=_number(block.get("temperature"), "current_weather.temperature"),
        wind_speed_kmh=_number(block.get("windspeed"), "current_weather.windspeed"),
        weather_code=int(code) if _is_number(code) else 0,
        humidity_percent=_first_humidity(payload),
        sunrise=_first_timestamp(payload, "sunrise"),
        sunset=_first_timestamp(payload, "sunset"),
    )


def build_daily(payload: dict) -> list[DailyForecastEntry]:
    """Zip the daily columns into rows, keeping only indices present in every column."""
    daily = payload.get("daily")
    dates = _column(daily, "time")
    maxes = _column(daily, "temperature_2m_max")
    mins = _column(daily, "temperature_2m_min")
    codes = _column(daily, "weathercode")

    length = min(len(dates), len(maxes), len(mins), len(codes))
    if length < max(len(dates), len(maxes), len(mins), len(codes)):
        logger.debug("Daily columns have uneven lengths, truncating to %d", length)

    return [
        DailyForecastEntry(
            date=_date(dates[i], f"daily.time[{i}]"),
            min_temp_celsius=_number(mins[i], f"daily.temperature_2m_min[{i}]"),
            max_temp_celsius=_number(maxes[i], f"daily.temperature_2m_max[{i}]"),
            weather_code=int(_number(codes[i], f"daily.weathercode[{i}]")),
        )
        for i in range(length)
    ]


def build_hourly(payload: dict) -> list[HourlyForecastEntry]:
    """Zip the hourly columns into rows. No time window is applied here."""
    hourly = payload.get("hourly")
    times = _column(hourly, "time")
    temps = _column(hourly, "temperature_2m")
    codes = _column(hourly, "weathercode")

    length = min(len(times), len(temps), len(codes))
    return [
        HourlyForecastEntry(
            timestamp=_datetime(times[i], f"hourly.time[{i}]"),
            temperature_celsius=_number(temps[i], f"hourly.temperature_2m[{i}]"),
            weather_code=int(_number(codes[i], f"hourly.weathercode[{i}]")),
        )
        for i in range(length)
    ]


def _column(block, key: str) -> list:
    """Return a column array from a daily/hourly block, or [] when either is absent."""
    if not isinstance(block, dict):
        return []
    col = block.get(key)
    return col if isinstance(col, list) else []


def _is_number(value) -> bool:
    """True for finite ints and floats. The JSON decoder also yields NaN and Infinity."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _number(value, field: str) -> float:
    if not _is_number(value):
        raise ForecastDecodeError(f"{field} is missing or not a number: {value!r}")
    return float(value)


def _date(value, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ForecastDecodeError(f"{field} is not an ISO date: {value!r}") from e


def _datetime(value, field: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ForecastDecodeError(f"{field} is not an ISO timestamp: {value!r}") from e


def _first_humidity(payload: dict) -> int | None:
    series = _column(payload.get("hourly"), "relativehumidity_2m")
    if series and _is_number(series[0]):
        return int(series[0])
    return None


def _first_timestamp(payload: dict, key: str) -> datetime | None:
    series = _column(payload.get("daily"), key)
    if not series:
        return None
    try:
        return datetime.fromisoformat(series[0])
    except (TypeError, ValueError):
        logger.debug("Ignoring unparseable daily.%s[0]: %r", key, series[0])
        return None
