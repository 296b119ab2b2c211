"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import sys

import requests

from weather_lookup import __version__
from weather_lookup.config import get_settings
from weather_lookup.datasources.openweather import MissingApiKeyError
from weather_lookup.flows.lookup import lookup_weather
from weather_lookup.server import create_server
from weather_lookup.view import WeatherView


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Current conditions plus hourly and daily forecasts for a city",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'lookup' command - print weather for a city
    lookup_parser = subparsers.add_parser("lookup", help="Print weather for a city")
    lookup_parser.add_argument("city", nargs="+", help="City name, e.g. London or 'New York'")
    lookup_parser.add_argument(
        "--json",
        action="store_true",
        help="Print all records as JSON",
    )

    # 'build' command - run the lookup flow and write the site
    build_parser = subparsers.add_parser("build", help="Build the widget page for a city")
    build_parser.add_argument("city", nargs="+", help="City name")

    # 'serve' command - interactive widget server
    serve_parser = subparsers.add_parser("serve", help="Serve the widget locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _print_summary(view: WeatherView) -> None:
    conditions = view.conditions
    if conditions is not None:
        location = ", ".join(p for p in (conditions.city, conditions.country) if p)
        temperature = "--" if view.temperature is None else f"{view.temperature}°C"
        print(f"{location or view.city}: {temperature}, {conditions.description}")
        print(f"Humidity: {conditions.humidity}%  Wind: {conditions.wind_speed} m/s")
        if conditions.last_updated:
            print(f"Last updated: {conditions.last_updated}")

    if view.hourly_forecast:
        print("\nHourly:")
        for h in view.hourly_forecast:
            print(f"  {h.time:<26} {h.temp_max:>4}°C / {h.temp_min:>4}°C  {h.description}")

    if view.daily_forecast:
        print("\nDaily:")
        for d in view.daily_forecast:
            print(f"  {d.date:<10} {d.temp_max:>4}°C / {d.temp_min:>4}°C  {d.description}")


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key configured: {'yes' if settings.openweather_api_key else 'no'}")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    view = WeatherView(timezone=settings.display_tz)
    try:
        found = view.search(" ".join(args.city))
    except (MissingApiKeyError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not found:
        print("Error: city name is empty", file=sys.stderr)
        return 1

    if args.json:
        payload = {
            "city": view.city,
            "temperature": view.temperature,
            "current": view.conditions.model_dump() if view.conditions else None,
            "hourly": [h.model_dump() for h in view.hourly_forecast],
            "daily": [d.model_dump() for d in view.daily_forecast],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_summary(view)
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: run the lookup flow."""
    try:
        result = lookup_weather(" ".join(args.city))
    except (MissingApiKeyError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Done: {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the interactive widget server."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    with create_server(port) as server:
        print(f"Serving weather widget on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "lookup": cmd_lookup,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
