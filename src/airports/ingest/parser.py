"""Shape check and comma-aware splitting of raw airport feed lines."""

import re
from typing import List

from airports.errors import SkippableRecordError

# ID,"Name","City","Country","IATA","ICAO",Lat,Lon,...
LINE_PATTERN = re.compile(
    r'^[0-9]{1,4},(".*",){3}("[A-Za-z]+",){2}([-0-9]{1,4}(\.[0-9]*)?,){2}'
)

# id, name, city, country, iata, icao, latitude, longitude, altitude
MIN_FIELDS = 9


def is_valid_line(line: str) -> bool:
    """Return True if the line has the shape of an airport record."""
    return bool(LINE_PATTERN.match(line))


def split_record(line: str) -> List[str]:
    """
    Split a record on commas that are not inside double quotes.
    Quote characters are kept in the returned fields.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    prev = ""
    for ch in line:
        if ch == '"' and prev != "\\":
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        prev = ch
    fields.append("".join(current))
    return fields


def decode_line(raw: bytes, encoding: str = "utf-8") -> str:
    """Decode one raw feed line. Raises SkippableRecordError if it is not valid text."""
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise SkippableRecordError(raw.decode(encoding, errors="replace"), f"line is not valid {encoding} ({e.reason})")


def parse_line(line: str) -> List[str]:
    """Validate and split one line. Raises SkippableRecordError if it is not a record."""
    line = line.rstrip("\r\n")
    if not is_valid_line(line):
        raise SkippableRecordError(line, "line does not match the airport record pattern")
    fields = split_record(line)
    if len(fields) < MIN_FIELDS:
        raise SkippableRecordError(line, f"expected at least {MIN_FIELDS} fields, got {len(fields)}")
    return fields


def unquote(field: str) -> str:
    """Strip surrounding double quotes from a raw field."""
    return field.strip('"')
