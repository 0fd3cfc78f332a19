"""Unit tests for the region reference table."""

from airports.reference.regions import RegionEntry, RegionTable


class TestRegionTableLookup:
    """Tests for RegionTable.lookup."""

    def test_found(self, regions) -> None:
        result = regions.lookup("Papua New Guinea")
        assert result.status == "found"
        assert result.found
        assert result.entry.two_letter_code == "PG"

    def test_no_match(self, regions) -> None:
        result = regions.lookup("Atlantis")
        assert result.status == "no_match"
        assert result.entry is None
        assert not result.found

    def test_invalid_codes(self, regions) -> None:
        result = regions.lookup("Canada")
        assert result.status == "invalid"
        assert result.entry.english_name == "Canada (broken)"
        assert "no valid ISO codes" in result.reason

    def test_substring_binds_to_first_containing_entry(self) -> None:
        table = RegionTable(
            [
                RegionEntry("Nigeria", "NG", "NGA"),
                RegionEntry("Niger", "NE", "NER"),
            ]
        )
        assert table.lookup("Niger").entry.two_letter_code == "NG"
        assert table.lookup("Nigeria").entry.two_letter_code == "NG"

    def test_lookup_is_case_sensitive(self, regions) -> None:
        assert regions.lookup("papua new guinea").status == "no_match"


class TestRegionTableFromPycountry:
    """Tests for the default pycountry-backed table."""

    def test_builds_entries(self) -> None:
        table = RegionTable.from_pycountry()
        assert len(table) > 200

    def test_japan(self) -> None:
        result = RegionTable.from_pycountry().lookup("Japan")
        assert result.found
        assert result.entry.two_letter_code == "JP"
        assert result.entry.three_letter_code == "JPN"

    def test_official_name_included(self) -> None:
        result = RegionTable.from_pycountry().lookup("Federal Republic of Germany")
        assert result.found
        assert result.entry.three_letter_code == "DEU"
