"""Pytest configuration and fixtures."""

import json
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from airports.config import Settings  # noqa: E402
from airports.models import Airport, City, Country, Location  # noqa: E402
from airports.reference.regions import RegionEntry, RegionTable  # noqa: E402

GOROKA = (
    '1,"Goroka Airport","Goroka","Papua New Guinea","GKA","AYGA",'
    '-6.081689834590001,145.391998291,5282,10,"U","Pacific/Port_Moresby","airport","OurAirports"'
)
MADANG = (
    '2,"Madang","Madang","Papua New Guinea","MAG","AYMD",'
    '-5.20707988739,145.789001465,20,10,"U","Pacific/Port_Moresby","airport","OurAirports"'
)
HEATHROW = (
    '507,"London Heathrow Airport","London","United Kingdom","LHR","EGLL",'
    '51.4706,-0.461941,83,0,"E","Europe/London","airport","OurAirports"'
)
GATWICK = (
    '502,"London Gatwick Airport","London","United Kingdom","LGW","EGKK",'
    '51.148102,-0.190278,202,0,"E","Europe/London","airport","OurAirports"'
)
LONDON_ONTARIO = (
    '3830,"London Airport","London","Canada","YXU","CYXU",'
    '43.035599,-81.1539,912,-5,"A","America/Toronto","airport","OurAirports"'
)
FIUMICINO = (
    '1555,"Leonardo da Vinci, Fiumicino Airport","Rome","Italy","FCO","LIRF",'
    '41.8002778,12.2388889,13,1,"E","Europe/Rome","airport","OurAirports"'
)
NOT_A_RECORD = "this is not an airport record"
MISSING_IATA = (
    '5,"Nadzab Airport","Nadzab","Papua New Guinea",\\N,"AYNZ",'
    '-6.569803,146.725977,239,10,"U","Pacific/Port_Moresby","airport","OurAirports"'
)

FEED_LINES = [GOROKA, MADANG, NOT_A_RECORD, HEATHROW, GATWICK, LONDON_ONTARIO, MISSING_IATA, FIUMICINO]

TIME_ZONES = [
    {"AirportId": 1, "TimeZoneInfoId": "Pacific/Port_Moresby"},
    {"AirportId": 507, "TimeZoneInfoId": "Europe/London"},
    {"AirportId": 9999, "TimeZoneInfoId": "Europe/Nowhere"},
]


@pytest.fixture
def regions() -> RegionTable:
    return RegionTable(
        [
            RegionEntry("Papua New Guinea", "PG", "PNG"),
            RegionEntry("United Kingdom of Great Britain and Northern Ireland", "GB", "GBR"),
            RegionEntry("Canada (broken)", "C", None),
        ]
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(input_dir=tmp_path / "data", output_dir=tmp_path / "data" / "output")


@pytest.fixture
def write_inputs(settings: Settings):
    """Write a feed and timezone file into the settings' input directory."""

    def _write(lines=None, time_zones=None) -> Settings:
        settings.input_dir.mkdir(parents=True, exist_ok=True)
        lines = FEED_LINES if lines is None else lines
        time_zones = TIME_ZONES if time_zones is None else time_zones
        settings.source_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        settings.timezone_path.write_text(json.dumps(time_zones), encoding="utf-8")
        return settings

    return _write


def make_airport(
    airport_id: int,
    iata: str,
    city: str = "Testville",
    country: str = "Testland",
    latitude: str = "0",
    longitude: str = "0",
) -> Airport:
    """Build a standalone airport for query tests."""
    c = Country(id=1, name=country)
    ci = City(id=1, name=city, country_id=1, country=c)
    return Airport(
        id=airport_id,
        name=f"{city} {iata}",
        full_name=f"{city} {iata} Airport",
        iata_code=iata,
        icao_code=f"X{iata}",
        city_id=ci.id,
        city=ci,
        country_id=c.id,
        country=c,
        location=Location(
            longitude=Decimal(longitude), latitude=Decimal(latitude), altitude=Decimal("0")
        ),
    )
