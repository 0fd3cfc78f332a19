"""Normalized airport data model."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple


@dataclass
class Country:
    """Country deduplicated by name."""

    id: int
    name: str
    two_letter_iso_code: Optional[str] = None
    three_letter_iso_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "two_letter_iso_code": self.two_letter_iso_code,
            "three_letter_iso_code": self.three_letter_iso_code,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            two_letter_iso_code=data.get("two_letter_iso_code"),
            three_letter_iso_code=data.get("three_letter_iso_code"),
        )


@dataclass
class City:
    """City deduplicated by (city name, country name)."""

    id: int
    name: str
    country_id: int
    country: Country
    time_zone_name: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        """Dedup key as (city name, country name)."""
        return (self.name, self.country.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "country_id": self.country_id,
            "country": self.country.to_dict(),
            "time_zone_name": self.time_zone_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "City":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            country_id=int(data["country_id"]),
            country=Country.from_dict(data["country"]),
            time_zone_name=data.get("time_zone_name"),
        )


@dataclass
class Location:
    """
    Geographic position. Values keep the scale of their source text.

    Feed columns are read in OpenFlights order: latitude, longitude, altitude.
    source_text holds those three fields verbatim and is the dedup key.
    """

    longitude: Decimal
    latitude: Decimal
    altitude: Decimal
    source_text: Optional[Tuple[str, str, str]] = field(default=None, compare=False)

    @property
    def key(self) -> Tuple[str, str, str]:
        """Textual coordinates in feed column order (latitude, longitude, altitude)."""
        if self.source_text is not None:
            return self.source_text
        return (str(self.latitude), str(self.longitude), str(self.altitude))

    def to_dict(self) -> Dict[str, Any]:
        # Decimals are written as strings so "12.00" does not come back as 12.0
        return {
            "longitude": str(self.longitude),
            "latitude": str(self.latitude),
            "altitude": str(self.altitude),
            "source_text": list(self.key),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        return cls(
            longitude=Decimal(str(data["longitude"])),
            latitude=Decimal(str(data["latitude"])),
            altitude=Decimal(str(data["altitude"])),
            source_text=tuple(data["source_text"]) if data.get("source_text") else None,
        )


@dataclass
class Airport:
    """Airport record with references to its city, country and location."""

    id: int
    name: str
    full_name: str
    iata_code: str
    icao_code: str
    city_id: int
    city: City
    country_id: int
    country: Country
    location: Location
    time_zone_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "full_name": self.full_name,
            "iata_code": self.iata_code,
            "icao_code": self.icao_code,
            "city_id": self.city_id,
            "city": self.city.to_dict(),
            "country_id": self.country_id,
            "country": self.country.to_dict(),
            "location": self.location.to_dict(),
            "time_zone_name": self.time_zone_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Airport":
        """Build an airport with its own copies of the embedded entities."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            full_name=data["full_name"],
            iata_code=data["iata_code"],
            icao_code=data["icao_code"],
            city_id=int(data["city_id"]),
            city=City.from_dict(data["city"]),
            country_id=int(data["country_id"]),
            country=Country.from_dict(data["country"]),
            location=Location.from_dict(data["location"]),
            time_zone_name=data.get("time_zone_name"),
        )


@dataclass
class AirportTimeZoneInfo:
    """Timezone assignment for one airport, used only during enrichment."""

    airport_id: int
    time_zone_id: str
