"""Normalize the OpenFlights airport feed and query the result."""

from airports.config import Settings
from airports.ingest import Loader, LoadResult
from airports.models import Airport, AirportTimeZoneInfo, City, Country, Location
from airports.query import AirportManager

__all__ = [
    "Airport",
    "AirportManager",
    "AirportTimeZoneInfo",
    "City",
    "Country",
    "LoadResult",
    "Loader",
    "Location",
    "Settings",
]
