"""``noaa`` command line entry point."""
from __future__ import annotations

import argparse
import json
import logging
import pprint
import sys
from typing import List, Optional

from .config import ImproperlyConfigured, Settings
from .errors import WeatherError
from .services.weather import WeatherService


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="noaa", description="Current weather from NOAA decoded METAR reports.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Turn on verbose output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Display weather information")
    info.add_argument("--station-id", default=settings.default_station, help="Station code (default: %(default)s)")
    info.add_argument("--json", action="store_true", help="Print the record as JSON")
    # accepted after the subcommand as well
    info.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    return parser


def configure_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _info(args: argparse.Namespace, settings: Settings) -> int:
    service = WeatherService.from_settings(settings)
    try:
        info = service.get_weather(args.station_id)
    except ValueError as exc:
        print(f"noaa: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except WeatherError as exc:
        logger.debug("Lookup for %s failed", args.station_id, exc_info=exc)
        print(f"noaa: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        service.close()
    if args.json:
        print(json.dumps(info.as_dict(), indent=2))
    else:
        pprint.pprint(info)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ImproperlyConfigured as exc:
        print(f"noaa: {exc}", file=sys.stderr)
        return EXIT_USAGE

    args = build_parser(settings).parse_args(argv)
    configure_logging(args.verbose, settings)
    if args.command == "info":
        return _info(args, settings)
    return EXIT_USAGE  # pragma: no cover - argparse enforces the subcommand


if __name__ == "__main__":
    sys.exit(main())
