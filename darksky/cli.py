#!/usr/bin/env python
"""
Command-line interface for Dark Sky forecasts.

Usage:
    darksky-forecast 37.8267 -122.423
    darksky-forecast 19.2465 -99.1013 --exclude minutely flags --extend-hourly --lang es --units si
    darksky-forecast --preset "London, UK" --time 2016-01-01T12:00:00Z --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from darksky.api.client import DarkSkyClient
from darksky.api.errors import DarkSkyError
from darksky.config.settings import PRESET_LOCATIONS, get_settings
from darksky.data.models import Datablock, Forecast
from darksky.data.options import Block, Language, Options, Unit

logger = logging.getLogger(__name__)


def parse_time(value: str):
    """Parse a Time Machine time: Unix seconds or an ISO-like string."""
    try:
        return int(value)
    except ValueError:
        pass
    if len(value) < 19 or value[10] != "T":
        raise argparse.ArgumentTypeError(
            f"Invalid time: '{value}'. Use Unix seconds or YYYY-MM-DDTHH:MM:SS[Z|+HHMM]."
        )
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="darksky-forecast",
        description="Fetch a weather forecast from the Dark Sky API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Current forecast with automatic units
  darksky-forecast 37.8267 -122.423

  # Spanish summaries, SI units, no minutely block
  darksky-forecast 19.2465 -99.1013 --exclude minutely --lang es --units si

  # Time Machine request for a preset location
  darksky-forecast --preset "Mexico City, MX" --time 1450000000
        """
    )

    location_group = parser.add_argument_group('Location')
    location_group.add_argument('latitude', type=float, nargs='?', help='Latitude in decimal degrees')
    location_group.add_argument('longitude', type=float, nargs='?', help='Longitude in decimal degrees')
    location_group.add_argument(
        '--preset',
        type=str,
        choices=list(PRESET_LOCATIONS.keys()),
        default=None,
        help='Use a preset location instead of coordinates'
    )

    request_group = parser.add_argument_group('Request Options')
    request_group.add_argument(
        '--time',
        type=parse_time,
        default=None,
        help='Time Machine time (Unix seconds or YYYY-MM-DDTHH:MM:SS[Z|+HHMM])'
    )
    request_group.add_argument(
        '--exclude',
        nargs='+',
        choices=[b.value for b in Block],
        default=None,
        help='Blocks to exclude from the response'
    )
    request_group.add_argument(
        '--extend-hourly',
        action='store_true',
        help='Extend the hourly block to seven days'
    )
    request_group.add_argument(
        '--lang',
        choices=[lang.value for lang in Language],
        default=None,
        help='Language of summaries'
    )
    request_group.add_argument(
        '--units',
        choices=[u.value for u in Unit],
        default=None,
        help='Unit system (default: settings, usually auto)'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '--json',
        action='store_true',
        help='Print the deserialized forecast as JSON'
    )
    output_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    return parser


def build_options(args: argparse.Namespace, default_units: Unit, default_language: Optional[Language]) -> Options:
    """Build request options from parsed arguments and settings defaults."""
    options = Options().unit(args.units or default_units)
    if args.exclude:
        options.exclude(args.exclude)
    if args.extend_hourly:
        options.extend_hourly()
    language = args.lang or default_language
    if language:
        options.language(language)
    return options


def _block_line(name: str, block: Optional[Datablock]) -> Optional[str]:
    if block is None:
        return None
    summary = block.summary or "no summary"
    return f"{name.capitalize():<9} {summary} ({block.count} datapoints)"


def format_forecast(forecast: Forecast) -> List[str]:
    """Render a short human-readable summary of a forecast."""
    lines = [
        f"Location: ({forecast.latitude}, {forecast.longitude}) {forecast.timezone}",
    ]
    if forecast.units:
        lines.append(f"Units:    {forecast.units}")

    current = forecast.currently
    if current is not None:
        parts = [current.summary or "no summary"]
        if current.temperature is not None:
            parts.append(f"{current.temperature:.1f}°")
        if current.wind_speed is not None:
            parts.append(f"wind {current.wind_speed:.1f}")
        if current.precip_probability is not None:
            parts.append(f"precip {current.precip_probability:.0%}")
        lines.append(f"Now:      {', '.join(parts)} at {current.timestamp.isoformat()}")

    for name in ("minutely", "hourly", "daily"):
        line = _block_line(name, getattr(forecast, name))
        if line:
            lines.append(line)

    for alert in forecast.alerts:
        lines.append(f"ALERT ({alert.severity.value}): {alert.title} until {alert.expires_at.isoformat()}")

    return lines


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.preset:
        latitude = PRESET_LOCATIONS[args.preset]["latitude"]
        longitude = PRESET_LOCATIONS[args.preset]["longitude"]
    elif args.latitude is not None and args.longitude is not None:
        latitude, longitude = args.latitude, args.longitude
    else:
        parser.error("either LATITUDE LONGITUDE or --preset is required")

    try:
        settings = get_settings()
        options = build_options(args, settings.default_units, settings.default_language)

        with DarkSkyClient(settings=settings) as client:
            if args.time is not None:
                forecast = client.get_forecast_time_machine(latitude, longitude, args.time, options)
            else:
                forecast = client.get_forecast_with_options(latitude, longitude, options)
    except (DarkSkyError, ValueError) as e:
        logger.error(f"Error fetching forecast: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    if args.json:
        print(json.dumps(forecast.to_dict(), indent=2))
    else:
        print("\n".join(format_forecast(forecast)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
