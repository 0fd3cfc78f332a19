"""Assemble Airport entities from parsed fields and resolved references."""

from typing import Sequence

from airports.ingest.parser import unquote
from airports.models import Airport, City, Country, Location

AIRPORT_WORD = "Airport"


def generate_full_name(name: str) -> str:
    """Append " Airport" unless the name already ends with it (case-insensitive)."""
    suffix_length = len(AIRPORT_WORD)
    if len(name) < suffix_length:
        return f"{name} {AIRPORT_WORD}"
    if name[-suffix_length:].lower() == AIRPORT_WORD.lower():
        return name
    return f"{name} {AIRPORT_WORD}"


def build_airport(
    fields: Sequence[str], country: Country, city: City, location: Location
) -> Airport:
    """Build an airport from a parsed record. The id is taken from the record itself."""
    name = unquote(fields[1])
    return Airport(
        id=int(fields[0]),
        name=name,
        full_name=generate_full_name(name),
        iata_code=unquote(fields[4]),
        icao_code=unquote(fields[5]),
        city_id=city.id,
        city=city,
        country_id=country.id,
        country=country,
        location=location,
    )
