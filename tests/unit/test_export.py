"""
Unit tests for CSV export formatting
"""

from datetime import datetime, timezone

from backend.sonarlog.export import (
    CSV_COLUMNS,
    fixed,
    iso_timestamp,
    records_to_csv,
    records_to_dataframe,
)
from backend.sonarlog.models import SonarRecord


def make_record(**overrides):
    values = dict(
        latitude=59.123456789,
        longitude=-18.5,
        timestamp=datetime(2023, 11, 14, 22, 13, 25, 123456, tzinfo=timezone.utc),
        water_depth=9.999,
        min_range=0.0,
        max_range=30.48,
        bottom_density_1=83,
        bottom_density_10=12.25,
        bottom_density_100=132.5,
        x=1_000_000,
        y=2_000_000,
    )
    values.update(overrides)
    return SonarRecord(**values)


class TestFixed:

    def test_ties_round_away_from_zero(self):
        assert fixed(2.25, 1) == "2.3"
        assert fixed(-2.25, 1) == "-2.3"
        assert fixed(0.5, 0) == "1"

    def test_binary_value_decides(self):
        # 1.005 is stored slightly below 1.005
        assert fixed(1.005, 2) == "1.00"

    def test_pads_zeros(self):
        assert fixed(-33.8, 7) == "-33.8000000"
        assert fixed(83, 1) == "83.0"


class TestCsv:

    def test_timestamp_format(self):
        ts = datetime(2023, 11, 14, 22, 13, 25, 999999, tzinfo=timezone.utc)
        assert iso_timestamp(ts) == "2023-11-14T22:13:25.999Z"

    def test_header_and_row(self):
        text = records_to_csv([make_record()])
        lines = text.splitlines()
        assert lines[0] == ",".join(CSV_COLUMNS)
        assert lines[1] == "59.1234568,-18.5000000,2023-11-14T22:13:25.123Z,10.00,83.0,12.3,132.5"

    def test_rows_in_record_order(self):
        text = records_to_csv([make_record(water_depth=1.0), make_record(water_depth=2.0)])
        depths = [line.split(",")[3] for line in text.splitlines()[1:]]
        assert depths == ["1.00", "2.00"]

    def test_empty_export_has_header_only(self):
        assert records_to_csv([]) == ",".join(CSV_COLUMNS) + "\n"

    def test_dataframe_columns(self):
        df = records_to_dataframe([make_record(), make_record(bottom_density_1=7)])
        assert list(df.columns) == CSV_COLUMNS
        assert df["bottom_density_1"].tolist() == [83, 7]
