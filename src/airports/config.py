"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ARTIFACT_NAMES = ("airports.json", "cities.json", "countries.json", "locations.json")


@dataclass(frozen=True)
class Settings:
    input_dir: Path = Path("data")
    output_dir: Path = Path("data/output")
    source_file: str = "airports.dat"
    timezone_file: str = "timezoneinfo.json"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            input_dir=Path(os.getenv("AIRPORTS_INPUT_DIR", "data")),
            output_dir=Path(os.getenv("AIRPORTS_OUTPUT_DIR", "data/output")),
            source_file=os.getenv("AIRPORTS_SOURCE_FILE", "airports.dat"),
            timezone_file=os.getenv("AIRPORTS_TIMEZONE_FILE", "timezoneinfo.json"),
            log_level=os.getenv("AIRPORTS_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def source_path(self) -> Path:
        return self.input_dir / self.source_file

    @property
    def timezone_path(self) -> Path:
        return self.input_dir / self.timezone_file

    def output_path(self, name: str) -> Path:
        return self.output_dir / name
