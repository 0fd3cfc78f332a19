"""Reference data used to enrich normalized airports."""

from airports.reference.regions import RegionEntry, RegionLookup, RegionTable

__all__ = ["RegionEntry", "RegionLookup", "RegionTable"]
