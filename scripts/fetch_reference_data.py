#!/usr/bin/env python3
"""
Download the OpenFlights airport feed into the input directory and derive
timezoneinfo.json from its tz database column.

Usage:
    uv run python scripts/fetch_reference_data.py
    uv run python scripts/fetch_reference_data.py --input-dir data/
"""

import argparse
import csv
import json
from pathlib import Path

import requests
from tqdm import tqdm

from airports.config import Settings

AIRPORTS_URL = "https://raw.githubusercontent.com/jpatokal/openflights/master/data/airports.dat"

# ID, Name, City, Country, IATA, ICAO, Lat, Lon, Alt, TZ, DST, TZ_name, Type, Source
TZ_NAME_COLUMN = 11


def main() -> None:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Fetch the OpenFlights airport feed")
    parser.add_argument(
        "--input-dir", type=str, default=None,
        help=f"Directory to write into (default: {settings.input_dir})",
    )
    args = parser.parse_args()

    data_dir = Path(args.input_dir) if args.input_dir else settings.input_dir
    data_dir.mkdir(parents=True, exist_ok=True)

    print("Fetching airports.dat...")
    resp = requests.get(AIRPORTS_URL, timeout=30)
    resp.raise_for_status()
    airports_path = data_dir / settings.source_file
    with open(airports_path, "w", encoding="utf-8") as f:
        f.write(resp.text)

    lines = resp.text.strip().splitlines()
    time_zones = []
    for row in tqdm(csv.reader(lines), total=len(lines), desc="Reading timezones", unit="row"):
        if len(row) <= TZ_NAME_COLUMN:
            continue
        tz_name = row[TZ_NAME_COLUMN].strip()
        if not tz_name or tz_name == "\\N":
            continue
        try:
            airport_id = int(row[0])
        except ValueError:
            continue
        time_zones.append({"AirportId": airport_id, "TimeZoneInfoId": tz_name})

    tz_path = data_dir / settings.timezone_file
    with open(tz_path, "w", encoding="utf-8") as f:
        json.dump(time_zones, f, indent=0)
    print(f"Wrote {len(lines)} rows to {airports_path}")
    print(f"Wrote {len(time_zones)} timezones to {tz_path}")


if __name__ == "__main__":
    main()
