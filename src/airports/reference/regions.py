"""Locale/region reference table used to derive country ISO codes."""

from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional

import pycountry


@dataclass(frozen=True)
class RegionEntry:
    """One region with its descriptive English name and ISO 3166 codes."""

    english_name: str
    two_letter_code: Optional[str]
    three_letter_code: Optional[str]


@dataclass
class RegionLookup:
    """Result of looking up a country name in a RegionTable."""

    status: Literal["found", "invalid", "no_match"]
    entry: Optional[RegionEntry] = None
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == "found"


def _is_code(value: Optional[str], length: int) -> bool:
    return (
        isinstance(value, str)
        and len(value) == length
        and value.isascii()
        and value.isalpha()
    )


class RegionTable:
    """
    Ordered, read-only list of regions searched by substring.

    The first entry whose english_name contains the country name wins, so a
    short name such as "Niger" can bind to an earlier, longer entry.
    """

    def __init__(self, entries: Iterable[RegionEntry]):
        self._entries: List[RegionEntry] = list(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_pycountry(cls) -> "RegionTable":
        """Build the default table from pycountry's ISO 3166-1 database."""
        entries = []
        for country in pycountry.countries:
            official = getattr(country, "official_name", None)
            if official and official != country.name:
                english_name = f"{country.name} ({official})"
            else:
                english_name = country.name
            entries.append(
                RegionEntry(
                    english_name=english_name,
                    two_letter_code=country.alpha_2,
                    three_letter_code=country.alpha_3,
                )
            )
        return cls(entries)

    def lookup(self, country_name: str) -> RegionLookup:
        """Find the first region whose English name contains country_name."""
        entry = next((e for e in self._entries if country_name in e.english_name), None)
        if entry is None:
            return RegionLookup(status="no_match")
        if not _is_code(entry.two_letter_code, 2) or not _is_code(entry.three_letter_code, 3):
            return RegionLookup(
                status="invalid",
                entry=entry,
                reason=f"region {entry.english_name!r} has no valid ISO codes",
            )
        return RegionLookup(status="found", entry=entry)
