"""
Tests for loader.py
"""

import pytest

from tempmatrix.core.loader import DataLoadError, load_daily_records, load_daily_rows

CSV_TEXT = """date,max_temperature,min_temperature,station
2023-07-15,34,27,HKO
2023-02-30,20,10,HKO
2023-07-16,,26,HKO
2023-07-17,33.5,26.1,HKO
"""


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "temperature_daily.csv"
    path.write_text(CSV_TEXT)
    return path


class TestLoadDailyRows:
    """Test load_daily_rows function."""

    def test_rows_kept_as_strings(self, csv_path):
        rows = load_daily_rows(csv_path)

        assert len(rows) == 4
        assert rows[0] == {"date": "2023-07-15", "max_temperature": "34", "min_temperature": "27"}
        # blank cells are not turned into NaN
        assert rows[2]["max_temperature"] == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="not found"):
            load_daily_rows(tmp_path / "nope.csv")

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("date,max_temperature\n2023-01-01,3\n")

        with pytest.raises(DataLoadError, match="min_temperature"):
            load_daily_rows(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")

        with pytest.raises(DataLoadError):
            load_daily_rows(path)


class TestLoadDailyRecords:
    """Test load_daily_records function."""

    def test_invalid_rows_dropped(self, csv_path):
        records = load_daily_records(csv_path)

        assert [(r.month, r.day) for r in records] == [(6, 15), (6, 17)]
        assert records[1].tmax == 33.5
