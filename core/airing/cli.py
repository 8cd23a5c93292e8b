"""
Airing command line interface.

Prints, for the next hours and days, the relative humidity indoor air would
reach after airing the room, at a range of indoor temperatures.
"""

import argparse
import sys

from loguru import logger
from rich.console import Console

from .exceptions import AiringError
from .forecast_client import ForecastClient
from .log_config import setup_logging
from .render import render_table
from .settings import EXPLANATION, load_settings
from .tables import daily_table, hourly_table

# Width used to measure a table's natural size
UNBOUNDED_WIDTH = 10_000


def setup_argparse() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="airing",
        description="Should I open the window? Projects outdoor humidity onto indoor temperatures.",
    )
    parser.add_argument("lat", type=float, nargs="?", help="Latitude (degrees)")
    parser.add_argument("lng", type=float, nargs="?", help="Longitude (degrees)")
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Forces output to use ASCII only",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: ./config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )
    return parser


def print_unwrapped(console: Console, renderable) -> None:
    """Print at the renderable's natural width so no cell is squeezed.

    Lines wider than the terminal are left for the terminal to wrap.
    """
    natural = console.measure(renderable, options=console.options.update_width(UNBOUNDED_WIDTH))
    width = console.width
    console.width = max(width, natural.maximum)
    try:
        console.print(renderable, crop=False)
    finally:
        console.width = width


def run(args: argparse.Namespace) -> None:
    """Fetch the forecast and print both tables.

    Raises:
        AiringError: On configuration or forecast retrieval failure
    """
    settings = load_settings(args.config).with_location(args.lat, args.lng)
    settings.validate()
    latitude, longitude = settings.require_location()
    ascii_only = args.ascii or settings.ascii
    console = Console(safe_box=ascii_only)

    client = ForecastClient(settings.api_url, timeout=settings.timeout)
    forecast = client.get_forecast(
        latitude,
        longitude,
        elevation=settings.elevation,
        forecast_days=settings.forecast_days,
    )
    now = forecast.local_now()
    logger.debug(f"Local time at location: {now:%Y-%m-%d %H:%M}")

    hourly = hourly_table(forecast.samples, now, settings)
    daily = daily_table(forecast.samples, now, settings)

    console.print(EXPLANATION)
    console.print()
    print_unwrapped(console, render_table(hourly, ascii_only))
    console.print()
    print_unwrapped(console, render_table(daily, ascii_only))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lng is None):
        parser.error("LAT and LNG must be given together")

    setup_logging(args.log_level)

    try:
        run(args)
    except AiringError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
