"""Read-only queries over a loaded airport collection."""

from airports.query.geo import haversine_km
from airports.query.manager import AirportManager

__all__ = ["AirportManager", "haversine_km"]
