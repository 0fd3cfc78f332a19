"""Load orchestration: raw feed to normalized artifacts, or cached artifacts back to memory."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from airports.config import ARTIFACT_NAMES, Settings
from airports.errors import MissingResourceError, SkippableRecordError
from airports.ingest.builder import build_airport
from airports.ingest.enrichment import apply_time_zones, find_iso_codes, read_time_zones
from airports.ingest.parser import decode_line, parse_line
from airports.ingest.resolver import EntityResolver
from airports.ingest.storage import read_artifact, write_artifact
from airports.models import Airport, City, Country, Location
from airports.reference.regions import RegionTable

logger = logging.getLogger(__name__)


class LoadState(Enum):
    NOT_STARTED = "not_started"
    SHORT_CIRCUIT_LOAD = "short_circuit_load"
    FULL_TRANSFORM = "full_transform"
    READY = "ready"


@dataclass
class LoadResult:
    """Summary of a load run."""

    short_circuited: bool
    state: LoadState = LoadState.NOT_STARTED
    accepted: int = 0
    skipped: int = 0
    time_zones_applied: int = 0
    iso_codes_assigned: int = 0

    @property
    def total_lines(self) -> int:
        return self.accepted + self.skipped


class Loader:
    """
    Builds the normalized airport model for one set of settings.

    If all four artifacts already exist in the output directory they are read
    back as-is. Otherwise the raw feed is parsed, deduplicated, enriched and
    written out. All tables belong to this instance.
    """

    def __init__(self, settings: Optional[Settings] = None, regions: Optional[RegionTable] = None):
        self.settings = settings or Settings.from_env()
        self._regions = regions
        self.state = LoadState.NOT_STARTED
        self.result: Optional[LoadResult] = None
        self._airports: Dict[int, Airport] = {}
        self._countries: Dict[str, Country] = {}
        self._cities: Dict[Tuple[str, str], City] = {}
        self._locations: Dict[Tuple[str, str, str], Location] = {}

    @property
    def airports(self) -> Dict[int, Airport]:
        return self._airports

    @property
    def countries(self) -> List[Country]:
        return list(self._countries.values())

    @property
    def cities(self) -> List[City]:
        return list(self._cities.values())

    @property
    def locations(self) -> List[Location]:
        return list(self._locations.values())

    @property
    def regions(self) -> RegionTable:
        if self._regions is None:
            self._regions = RegionTable.from_pycountry()
        return self._regions

    def output_exists(self) -> bool:
        """True if every normalized artifact is present in the output directory."""
        return all(self.settings.output_path(name).is_file() for name in ARTIFACT_NAMES)

    def load(self) -> LoadResult:
        """Run the load once and return its summary."""
        if self.state is LoadState.READY:
            return self.result

        if self.output_exists():
            self.state = LoadState.SHORT_CIRCUIT_LOAD
            logger.info("Reading normalized data from %s", self.settings.output_dir)
            self.read_imported_files()
            result = LoadResult(short_circuited=True, accepted=len(self._airports))
        else:
            self.state = LoadState.FULL_TRANSFORM
            # Read first so a missing timezone file fails before the feed is parsed
            time_zones = read_time_zones(self.settings.timezone_path)
            accepted, skipped = self.transform_data()
            result = LoadResult(short_circuited=False, accepted=accepted, skipped=skipped)
            result.time_zones_applied = apply_time_zones(self._airports, time_zones)
            result.iso_codes_assigned = find_iso_codes(self._airports, self.regions)
            self.serialize_objects()

        self.state = LoadState.READY
        result.state = self.state
        self.result = result
        logger.info(
            "Loaded %d airports, %d cities, %d countries, %d locations",
            len(self._airports), len(self._cities), len(self._countries), len(self._locations),
        )
        return result

    def transform_data(self) -> Tuple[int, int]:
        """Parse the raw feed into the entity tables. Returns (accepted, skipped) line counts."""
        resolver = EntityResolver()
        self._airports = {}
        accepted = 0
        skipped = 0
        path = self.settings.source_path
        try:
            # Binary so an undecodable line is skipped on its own
            with open(path, "rb") as f:
                for raw in f:
                    try:
                        fields = parse_line(decode_line(raw))
                        location = resolver.resolve_location(fields)
                        country = resolver.resolve_country(fields)
                        city = resolver.resolve_city(fields, country)
                    except SkippableRecordError as e:
                        logger.debug("Skipping row: %s", e)
                        skipped += 1
                        continue
                    airport = build_airport(fields, country, city, location)
                    self._airports[airport.id] = airport
                    accepted += 1
        except FileNotFoundError:
            raise MissingResourceError(path, "airport feed not found")
        except OSError as e:
            raise MissingResourceError(path, f"airport feed unreadable ({e})")

        self._countries = resolver.countries
        self._cities = resolver.cities
        self._locations = resolver.locations
        logger.info("There were %d rows that did not match the airport pattern", skipped)
        return accepted, skipped

    def serialize_objects(self) -> None:
        """Write all four collections to the output directory."""
        payloads = {
            "airports.json": [a.to_dict() for a in self._airports.values()],
            "cities.json": [c.to_dict() for c in self._cities.values()],
            "countries.json": [c.to_dict() for c in self._countries.values()],
            "locations.json": [loc.to_dict() for loc in self._locations.values()],
        }
        for name, records in payloads.items():
            path = self.settings.output_path(name)
            count = write_artifact(path, records)
            logger.info("Wrote %d records to %s", count, path)

    def read_imported_files(self) -> None:
        """Rebuild the tables from the artifacts, relinking embedded references to shared objects."""
        countries_by_id: Dict[int, Country] = {}
        cities_by_id: Dict[int, City] = {}

        for row in read_artifact(self.settings.output_path("countries.json")):
            self._register_country(Country.from_dict(row), countries_by_id)

        for row in read_artifact(self.settings.output_path("cities.json")):
            self._register_city(City.from_dict(row), cities_by_id, countries_by_id)

        for row in read_artifact(self.settings.output_path("locations.json")):
            location = Location.from_dict(row)
            self._locations.setdefault(location.key, location)

        for row in read_artifact(self.settings.output_path("airports.json")):
            airport = Airport.from_dict(row)
            airport.country = self._register_country(airport.country, countries_by_id)
            airport.city = self._register_city(airport.city, cities_by_id, countries_by_id)
            airport.location = self._locations.setdefault(airport.location.key, airport.location)
            self._airports[airport.id] = airport

    def _register_country(self, country: Country, by_id: Dict[int, Country]) -> Country:
        existing = by_id.get(country.id)
        if existing is not None:
            return existing
        by_id[country.id] = country
        self._countries.setdefault(country.name, country)
        return country

    def _register_city(
        self, city: City, by_id: Dict[int, City], countries_by_id: Dict[int, Country]
    ) -> City:
        existing = by_id.get(city.id)
        if existing is not None:
            return existing
        city.country = self._register_country(city.country, countries_by_id)
        by_id[city.id] = city
        self._cities.setdefault(city.key, city)
        return city
