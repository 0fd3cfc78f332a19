"""Exceptions raised while loading and querying airport data."""

from pathlib import Path
from typing import Union


class AirportsError(Exception):
    """Base class for airports errors."""


class SkippableRecordError(AirportsError):
    """A single input line could not be turned into an airport."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class MissingResourceError(AirportsError):
    """A required input or cached artifact is missing or unreadable."""

    def __init__(self, path: Union[str, Path], reason: str = "not found"):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class DuplicateAirportCodeError(AirportsError, LookupError):
    """More than one airport shares the requested IATA code."""

    def __init__(self, code: str, count: int):
        super().__init__(f"{count} airports share IATA code {code!r}")
        self.code = code
        self.count = count
