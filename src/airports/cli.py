"""CLI for loading and querying normalized airport data."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from airports.config import Settings
from airports.errors import DuplicateAirportCodeError, MissingResourceError
from airports.ingest.loader import Loader
from airports.query.manager import AirportManager


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Normalize the airport feed and run lookups on it"
    )
    parser.add_argument(
        "--input-dir",
        help="Directory holding airports.dat and timezoneinfo.json (default: $AIRPORTS_INPUT_DIR or data/)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for normalized JSON (default: $AIRPORTS_OUTPUT_DIR or data/output/)",
    )
    parser.add_argument(
        "--countries",
        "-c",
        action="store_true",
        help="List airport count per country",
    )
    parser.add_argument(
        "--cities",
        action="store_true",
        help="Show the cities with the most airports",
    )
    parser.add_argument(
        "--nearest",
        "-n",
        nargs=2,
        metavar=("LON", "LAT"),
        help="Find the airport closest to a coordinate",
    )
    parser.add_argument(
        "--iata",
        "-i",
        help="Look up an airport by IATA code",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write the airport table to a CSV file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log skipped rows",
    )
    return parser.parse_args(argv)


def _settings_from_args(args) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if args.input_dir:
        overrides["input_dir"] = Path(args.input_dir)
    if args.output_dir:
        overrides["output_dir"] = Path(args.output_dir)
    return replace(settings, **overrides)


def _print_airport(airport) -> None:
    print(f"  {airport.iata_code} / {airport.icao_code}  {airport.full_name}")
    print(f"  {airport.city.name}, {airport.country.name}")
    print(f"  lat {airport.location.latitude}, lon {airport.location.longitude}, alt {airport.location.altitude}")
    if airport.time_zone_name:
        print(f"  timezone {airport.time_zone_name}")


def main(argv=None):
    args = parse_args(argv)
    settings = _settings_from_args(args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    loader = Loader(settings)
    try:
        result = loader.load()
    except MissingResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not result.short_circuited:
        print(f"Accepted {result.accepted} rows, skipped {result.skipped}", file=sys.stderr)

    manager = AirportManager(loader.airports.values())

    if args.countries:
        print("\nAirports by country:")
        for country, count in manager.country_list().items():
            print(f"  {country}: {count}")

    if args.cities:
        print("\nCities with the most airports:")
        for city in sorted(manager.cities_by_airport_count()):
            print(f"  {city}")

    if args.nearest:
        lon_text, lat_text = args.nearest
        if not (manager.is_coordinate_valid(lon_text) and manager.is_coordinate_valid(lat_text)):
            print(f"Error: Invalid coordinate: {lon_text} {lat_text}", file=sys.stderr)
            sys.exit(1)
        try:
            longitude, latitude = float(lon_text), float(lat_text)
        except ValueError:
            print(f"Error: Invalid coordinate: {lon_text} {lat_text}", file=sys.stderr)
            sys.exit(1)
        airport = manager.nearest_airport(longitude, latitude)
        if airport is None:
            print("No airports loaded.", file=sys.stderr)
        else:
            print("\nNearest airport:")
            _print_airport(airport)

    if args.iata:
        if not manager.is_iata_code_valid(args.iata):
            print(f"Error: Invalid IATA code: {args.iata}", file=sys.stderr)
            sys.exit(1)
        try:
            airport = manager.get_airport_by_iata_code(args.iata)
        except DuplicateAirportCodeError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if airport is None:
            print(f"No airport with IATA code {args.iata.strip()}.", file=sys.stderr)
        else:
            print("\nAirport:")
            _print_airport(airport)

    if args.output:
        df = manager.to_dataframe()
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
