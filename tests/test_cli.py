"""Tests for the airports CLI."""

import pytest

from airports.cli import main


def _dirs(settings) -> list:
    return ["--input-dir", str(settings.input_dir), "--output-dir", str(settings.output_dir)]


class TestMain:
    """Tests for cli.main."""

    def test_lookups(self, write_inputs, capsys) -> None:
        settings = write_inputs()
        main(_dirs(settings) + ["--countries", "--cities", "--iata", "LHR", "--nearest", "145.4", "-6.1"])
        out = capsys.readouterr()
        assert "Accepted 6 rows, skipped 2" in out.err
        assert "  Italy: 1" in out.out
        assert "  London" in out.out
        assert "London Heathrow Airport" in out.out
        assert "Goroka Airport" in out.out
        assert settings.output_path("airports.json").is_file()

    def test_csv_output(self, write_inputs, tmp_path, capsys) -> None:
        settings = write_inputs()
        csv_path = tmp_path / "airports.csv"
        main(_dirs(settings) + ["--output", str(csv_path)])
        assert csv_path.read_text().startswith("id,name,full_name")
        assert "Wrote 6 rows" in capsys.readouterr().err

    def test_unknown_iata(self, write_inputs, capsys) -> None:
        main(_dirs(write_inputs()) + ["--iata", "ZZZ"])
        assert "No airport with IATA code ZZZ" in capsys.readouterr().err

    def test_invalid_iata_exits(self, write_inputs, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(_dirs(write_inputs()) + ["--iata", "lhr"])
        assert exc.value.code == 1
        assert "Invalid IATA code" in capsys.readouterr().err

    def test_invalid_coordinate_exits(self, write_inputs, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(_dirs(write_inputs()) + ["--nearest", "east", "12"])
        assert exc.value.code == 1

    def test_missing_feed_exits(self, settings, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(_dirs(settings))
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err
