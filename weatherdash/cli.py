"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging

from weatherdash.config.loader import get_config_value, load_config, set_config_value
from weatherdash.config.schema import DashboardConfig
from weatherdash.errors import WeatherDashError
from weatherdash.models.common import TemperatureUnit
from weatherdash.models.location import Coordinate
from weatherdash.reporting.formatters import format_snapshot_json, format_snapshot_text
from weatherdash.session import DashboardSession

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current, hourly and daily weather from Open-Meteo",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # current
    current_p = sub.add_parser("current", help="Print the forecast for a location")
    where = current_p.add_mutually_exclusive_group()
    where.add_argument("--search", metavar="NAME", help="Place name to geocode")
    where.add_argument(
        "--coords", nargs=2, type=float, metavar=("LAT", "LON"),
        help="Explicit latitude and longitude",
    )
    current_p.add_argument(
        "--unit", choices=[u.value for u in TemperatureUnit], default=None,
        help="Display unit (default from config)",
    )
    current_p.add_argument("--json", action="store_true", help="Emit JSON")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "current":
        return asyncio.run(_cmd_current(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_current(config: DashboardConfig, args) -> int:
    session = DashboardSession.from_config(config)
    unit = TemperatureUnit(args.unit) if args.unit else config.display.temperature_unit

    if args.search:
        state = await session.search(args.search)
    elif args.coords:
        latitude, longitude = args.coords
        coordinate = Coordinate(latitude=latitude, longitude=longitude, name="Custom Location")
        try:
            snapshot = await session.fetcher.fetch(latitude, longitude)
        except WeatherDashError as e:
            print(f"Error: {e}")
            return 1
        _print_snapshot(coordinate, snapshot, unit, args.json)
        return 0
    else:
        state = await session.load()

    if state.error:
        print(f"Error: {state.error}")
        return 1
    if state.coordinate is None or state.snapshot is None:
        print("No weather data available")
        return 1
    _print_snapshot(state.coordinate, state.snapshot, unit, args.json)
    return 0


def _print_snapshot(coordinate, snapshot, unit: TemperatureUnit, as_json: bool) -> None:
    if as_json:
        print(format_snapshot_json(coordinate, snapshot))
    else:
        print(format_snapshot_text(coordinate, snapshot, unit))


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        raw_key, sep, raw_value = args.keyvalue.partition("=")
        key = raw_key.strip()
        if not sep or not key:
            print("Error: use key=value format")
            return 1
        # ValidationError subclasses ValueError
        try:
            updated = set_config_value(config, key, raw_value.strip())
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(f"Set {key} = {get_config_value(updated, key)}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config: DashboardConfig, args) -> int:
    import uvicorn

    from weatherdash.api import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Serving dashboard API on %s:%d", host, port)
    uvicorn.run(create_app(config), host=host, port=port)
    return 0
