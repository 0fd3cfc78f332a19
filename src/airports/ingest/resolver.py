"""Deduplication of countries, cities and locations from parsed records."""

from decimal import Decimal, InvalidOperation
from typing import Dict, Sequence, Tuple

from airports.errors import SkippableRecordError
from airports.ingest.parser import unquote
from airports.models import City, Country, Location

CITY_FIELD = 2
COUNTRY_FIELD = 3
LATITUDE_FIELD = 6
LONGITUDE_FIELD = 7
ALTITUDE_FIELD = 8


class EntityResolver:
    """
    Owns the country, city and location tables for a single load.

    Each resolve_* call returns the existing entity for its dedup key or
    creates it. Names are compared exactly after stripping quotes, and
    locations by the verbatim text of their coordinate fields.
    """

    def __init__(self):
        self.countries: Dict[str, Country] = {}
        self.cities: Dict[Tuple[str, str], City] = {}
        self.locations: Dict[Tuple[str, str, str], Location] = {}
        self._max_country_id = 0
        self._max_city_id = 0

    def resolve_country(self, fields: Sequence[str]) -> Country:
        name = unquote(fields[COUNTRY_FIELD])
        country = self.countries.get(name)
        if country is None:
            self._max_country_id += 1
            country = Country(id=self._max_country_id, name=name)
            self.countries[name] = country
        return country

    def resolve_city(self, fields: Sequence[str], country: Country) -> City:
        name = unquote(fields[CITY_FIELD])
        key = (name, country.name)
        city = self.cities.get(key)
        if city is None:
            self._max_city_id += 1
            city = City(
                id=self._max_city_id,
                name=name,
                country_id=country.id,
                country=country,
            )
            self.cities[key] = city
        return city

    def resolve_location(self, fields: Sequence[str]) -> Location:
        key = (fields[LATITUDE_FIELD], fields[LONGITUDE_FIELD], fields[ALTITUDE_FIELD])
        location = self.locations.get(key)
        if location is None:
            try:
                location = Location(
                    longitude=Decimal(fields[LONGITUDE_FIELD]),
                    latitude=Decimal(fields[LATITUDE_FIELD]),
                    altitude=Decimal(fields[ALTITUDE_FIELD]),
                    source_text=key,
                )
            except InvalidOperation:
                raise SkippableRecordError(",".join(fields), "coordinates are not decimal numbers")
            self.locations[key] = location
        return location
