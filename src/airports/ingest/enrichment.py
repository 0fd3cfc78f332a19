"""Post-build enrichment: timezone names and country ISO codes."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from airports.errors import MissingResourceError
from airports.models import Airport, AirportTimeZoneInfo
from airports.reference.regions import RegionTable

logger = logging.getLogger(__name__)


def _get_first(item: dict, *keys: str) -> Optional[Any]:
    for k in keys:
        if item.get(k) is not None:
            return item[k]
    return None


def read_time_zones(path: Path) -> Dict[int, AirportTimeZoneInfo]:
    """Read the timezone reference file into a mapping keyed by airport id."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise MissingResourceError(path, "timezone file not found")
    except (OSError, json.JSONDecodeError) as e:
        raise MissingResourceError(path, f"timezone file unreadable ({e})")

    if not isinstance(data, list):
        raise MissingResourceError(path, "timezone file must contain a JSON list")

    time_zones: Dict[int, AirportTimeZoneInfo] = {}
    for item in data:
        if not isinstance(item, dict):
            continue
        airport_id = _get_first(item, "AirportId", "airport_id")
        zone = _get_first(item, "TimeZoneInfoId", "time_zone_id")
        if airport_id is None or not zone:
            continue
        try:
            info = AirportTimeZoneInfo(airport_id=int(airport_id), time_zone_id=str(zone))
        except (TypeError, ValueError):
            continue
        time_zones[info.airport_id] = info
    logger.info("Read %d timezone records from %s", len(time_zones), path)
    return time_zones


def apply_time_zones(
    airports: Mapping[int, Airport], time_zones: Mapping[int, AirportTimeZoneInfo]
) -> int:
    """Copy each timezone onto its airport and the airport's city. Returns the number applied."""
    applied = 0
    for zone in time_zones.values():
        airport = airports.get(zone.airport_id)
        if airport is None:
            continue
        airport.time_zone_name = zone.time_zone_id
        airport.city.time_zone_name = zone.time_zone_id
        applied += 1
    return applied


def find_iso_codes(airports: Mapping[int, Airport], regions: RegionTable) -> int:
    """
    Assign ISO 3166 codes to each airport's country from the region table.

    Countries are looked up once per airport. A miss leaves the codes unset;
    a match without usable codes is logged and also leaves them unset.
    Returns the number of airports whose country received codes.
    """
    assigned = 0
    for airport in airports.values():
        country = airport.country
        result = regions.lookup(country.name)
        if result.status == "no_match":
            continue
        if result.status == "invalid":
            logger.info("Region for %s is not correct: %s", country.name, result.reason)
            continue
        country.two_letter_iso_code = result.entry.two_letter_code
        country.three_letter_iso_code = result.entry.three_letter_code
        assigned += 1
    return assigned
