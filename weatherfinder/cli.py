# ABOUTME: Command-line entry point for the weather finder.
# ABOUTME: Runs search/locate/start through a WeatherSession and renders reports in the terminal.

import argparse
import asyncio
import logging
import sys

from weatherfinder.city_lists import CityLists
from weatherfinder.config import Settings, load_settings
from weatherfinder.deps import WeatherDeps, create_http_client
from weatherfinder.models import Coordinate, Failed, Loaded, ScreenState, WeatherReport
from weatherfinder.preferences import JsonPreferences
from weatherfinder.session import FixedLocationProvider, WeatherSession
from weatherfinder.units import format_temperature
from weatherfinder.weather_codes import describe, icon_category, icon_glyph

HOURS_SHOWN = 24


def render_report(report: WeatherReport, use_fahrenheit: bool, is_favorite: bool = False) -> str:
    """Render a report as plain text: current card, next 24 hours, next three days."""
    current = report.current
    star = " ★" if is_favorite else ""
    humidity = "--" if current.humidity_percent is None else str(current.humidity_percent)
    lines = [
        f"{current.location_name}{star}",
        f"  {icon_glyph(icon_category(current.weather_code))} "
        f"{format_temperature(current.temperature_celsius, use_fahrenheit)}  {describe(current.weather_code)}",
        f"  Wind {current.wind_speed_kmh:.1f} km/h   Humidity {humidity}%",
    ]
    if current.sunrise or current.sunset:
        sunrise = current.sunrise.strftime("%H:%M") if current.sunrise else "--"
        sunset = current.sunset.strftime("%H:%M") if current.sunset else "--"
        lines.append(f"  Sunrise {sunrise}   Sunset {sunset}")

    if report.hourly:
        lines.append("")
        lines.append("Next hours")
        for hour in report.hourly[:HOURS_SHOWN]:
            lines.append(
                f"  {hour.timestamp:%H:%M}  {icon_glyph(icon_category(hour.weather_code))} "
                f"{format_temperature(hour.temperature_celsius, use_fahrenheit, precision=0)}"
            )

    days = report.daily[1:4] if len(report.daily) >= 4 else report.daily
    if days:
        lines.append("")
        lines.append("Forecast")
        for day in days:
            lines.append(
                f"  {day.date:%a %d %b}  {describe(day.weather_code):<16} "
                f"{format_temperature(day.min_temp_celsius, use_fahrenheit)} / "
                f"{format_temperature(day.max_temp_celsius, use_fahrenheit)}"
            )
    return "\n".join(lines)


def render_state(state: ScreenState, cities: CityLists) -> str:
    if isinstance(state, Loaded):
        name = state.report.current.location_name
        return render_report(state.report, cities.is_fahrenheit, cities.is_favorite(name))
    if isinstance(state, Failed):
        return state.message
    return ""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather-finder", description="Look up current weather and forecasts")
    parser.add_argument("--prefs", default=None, help="Preferences JSON path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")

    search_p = sub.add_parser("search", help="Weather for a city name")
    search_p.add_argument("city", nargs="+", help="City name")

    locate_p = sub.add_parser("locate", help="Weather for a coordinate")
    locate_p.add_argument("--lat", type=float, required=True)
    locate_p.add_argument("--lon", type=float, required=True)

    start_p = sub.add_parser("start", help="Weather for the device location, or the default city")
    start_p.add_argument("--lat", type=float)
    start_p.add_argument("--lon", type=float)

    recent_p = sub.add_parser("recent", help="List recent searches")
    recent_p.add_argument("--remove", metavar="CITY", help="Forget a recent search")

    fav_p = sub.add_parser("favorite", help="Add or remove a favorite city")
    fav_p.add_argument("city", nargs="+", help="City name")

    sub.add_parser("favorites", help="List favorite cities")

    units_p = sub.add_parser("units", help="Set the temperature unit")
    units_p.add_argument("unit", choices=["celsius", "fahrenheit"])

    return parser


async def _run_lookup(args: argparse.Namespace, settings: Settings, cities: CityLists) -> int:
    async with create_http_client(settings) as client:
        deps = WeatherDeps(http_client=client, settings=settings)
        session = WeatherSession(deps, cities)

        if args.command == "search":
            state = await session.search(" ".join(args.city))
        elif args.command == "locate":
            state = await session.locate(Coordinate(latitude=args.lat, longitude=args.lon))
        else:
            provider = None
            if args.lat is not None and args.lon is not None:
                provider = FixedLocationProvider(Coordinate(latitude=args.lat, longitude=args.lon))
            state = await session.start(provider)

    output = render_state(state, cities)
    if output:
        print(output)
    return 0 if isinstance(state, Loaded) else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "start" and (args.lat is None) != (args.lon is None):
        parser.error("start needs both --lat and --lon, or neither")

    settings = load_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cities = CityLists(JsonPreferences(args.prefs or settings.prefs_path))

    if args.command in ("search", "locate", "start"):
        return asyncio.run(_run_lookup(args, settings, cities))

    if args.command == "recent":
        if args.remove:
            cities.remove_recent(args.remove)
        for city in cities.recent:
            print(city)
        return 0

    if args.command == "favorite":
        added = cities.toggle_favorite(" ".join(args.city))
        print("Added to favorites" if added else "Removed from favorites")
        return 0

    if args.command == "favorites":
        for city in cities.favorites:
            print(city)
        return 0

    if args.command == "units":
        cities.set_fahrenheit(args.unit == "fahrenheit")
        print(f"Temperatures will be shown in {args.unit.capitalize()}")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
