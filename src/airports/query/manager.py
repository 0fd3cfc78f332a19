"""Queries over a loaded airport collection."""

import re
from collections import Counter
from typing import Dict, Iterable, Optional, Set

import pandas as pd

from airports.errors import DuplicateAirportCodeError
from airports.models import Airport
from airports.query.geo import haversine_km

_COORDINATE_RE = re.compile(r"[0-9]{1,3}\.?[0-9]*")
_IATA_RE = re.compile(r"[A-Z]{3}")


class AirportManager:
    """Read-only query engine. The airport collection is not modified."""

    def __init__(self, airports: Iterable[Airport]):
        self._airports = tuple(airports)

    def __len__(self) -> int:
        return len(self._airports)

    def country_list(self) -> Dict[str, int]:
        """Number of airports per country name, ordered by country name."""
        counts = Counter(a.country.name for a in self._airports)
        return {name: counts[name] for name in sorted(counts)}

    def cities_by_airport_count(self) -> Set[str]:
        """Names of every city tied for the highest airport count."""
        counts = Counter(a.city.name for a in self._airports)
        if not counts:
            return set()
        top = max(counts.values())
        return {name for name, count in counts.items() if count == top}

    def nearest_airport(self, longitude: float, latitude: float) -> Optional[Airport]:
        """
        Closest airport to the given point by great-circle distance.

        The first airport wins when several are equally close. Returns None
        when there are no airports.
        """
        nearest = None
        distance = float("inf")
        for airport in self._airports:
            dist = haversine_km(
                latitude,
                longitude,
                float(airport.location.latitude),
                float(airport.location.longitude),
            )
            if dist < distance:
                nearest = airport
                distance = dist
        return nearest

    def get_airport_by_iata_code(self, code: str) -> Optional[Airport]:
        """Look up an airport by IATA code (whitespace-trimmed). Returns None if not found."""
        code = code.strip()
        matches = [a for a in self._airports if a.iata_code.strip() == code]
        if len(matches) > 1:
            raise DuplicateAirportCodeError(code, len(matches))
        return matches[0] if matches else None

    @staticmethod
    def is_coordinate_valid(coordinate: str) -> bool:
        """Loose check: the text contains a 1-3 digit number, optionally with decimals."""
        return bool(_COORDINATE_RE.search(coordinate))

    @staticmethod
    def is_iata_code_valid(code: str) -> bool:
        """Loose check: the text contains three consecutive uppercase letters."""
        return bool(_IATA_RE.search(code))

    def to_dataframe(self) -> pd.DataFrame:
        """Airports as a flat DataFrame."""
        columns = [
            "id",
            "name",
            "full_name",
            "iata_code",
            "icao_code",
            "city",
            "country",
            "latitude",
            "longitude",
            "altitude",
            "time_zone_name",
        ]
        if not self._airports:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "id": a.id,
                    "name": a.name,
                    "full_name": a.full_name,
                    "iata_code": a.iata_code,
                    "icao_code": a.icao_code,
                    "city": a.city.name,
                    "country": a.country.name,
                    "latitude": float(a.location.latitude),
                    "longitude": float(a.location.longitude),
                    "altitude": float(a.location.altitude),
                    "time_zone_name": a.time_zone_name,
                }
                for a in self._airports
            ],
            columns=columns,
        )

    def country_dataframe(self) -> pd.DataFrame:
        """Return country_list as DataFrame."""
        countries = self.country_list()
        if not countries:
            return pd.DataFrame(columns=["country", "count"])
        return pd.DataFrame([{"country": k, "count": v} for k, v in countries.items()])
