"""Unit tests for Settings."""

from pathlib import Path

from airports.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch) -> None:
        for var in (
            "AIRPORTS_INPUT_DIR",
            "AIRPORTS_OUTPUT_DIR",
            "AIRPORTS_SOURCE_FILE",
            "AIRPORTS_TIMEZONE_FILE",
            "AIRPORTS_LOG_LEVEL",
        ):
            monkeypatch.delenv(var, raising=False)
        s = Settings.from_env()
        assert s.source_path == Path("data/airports.dat")
        assert s.timezone_path == Path("data/timezoneinfo.json")
        assert s.output_path("cities.json") == Path("data/output/cities.json")
        assert s.log_level == "INFO"

    def test_from_env(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("AIRPORTS_INPUT_DIR", str(tmp_path / "in"))
        monkeypatch.setenv("AIRPORTS_OUTPUT_DIR", str(tmp_path / "out"))
        monkeypatch.setenv("AIRPORTS_SOURCE_FILE", "feed.dat")
        monkeypatch.setenv("AIRPORTS_TIMEZONE_FILE", "zones.json")
        monkeypatch.setenv("AIRPORTS_LOG_LEVEL", "debug")
        s = Settings.from_env()
        assert s.source_path == tmp_path / "in" / "feed.dat"
        assert s.timezone_path == tmp_path / "in" / "zones.json"
        assert s.output_path("airports.json") == tmp_path / "out" / "airports.json"
        assert s.log_level == "DEBUG"
