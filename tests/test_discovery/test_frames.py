"""Tests for pandas exports."""

from pehchaan_index.discovery.aggregation import aggregate_by_period
from pehchaan_index.discovery.frames import (
    records_to_frame,
    regions_to_frame,
    sub_regions_to_frame,
)
from pehchaan_index.ingestion.csv_parser import RawRecord

RECORDS = [
    RawRecord("2024-01", "Goa", "Panaji", 1, 2, 3),
    RawRecord("2024-01", "Kerala", "Kochi", 10, 20, 30),
    RawRecord("2024-01", "Goa", "Margao", 4, 5, 6),
]


class TestRecordsToFrame:
    def test_columns_and_order(self):
        df = records_to_frame(RECORDS)
        assert list(df.columns) == [
            "period", "region", "sub_region",
            "bracket_low", "bracket_mid", "bracket_high", "total",
        ]
        assert df["sub_region"].tolist() == ["Panaji", "Kochi", "Margao"]
        assert df["total"].tolist() == [6, 60, 15]

    def test_empty_keeps_columns(self):
        df = records_to_frame([])
        assert df.empty
        assert "total" in df.columns


class TestRegionsToFrame:
    def test_one_row_per_region(self):
        df = regions_to_frame(aggregate_by_period(RECORDS, "2024-01"))
        assert df["region"].tolist() == ["Kerala", "Goa"]
        assert df["sub_region_count"].tolist() == [1, 2]
        assert df["total"].sum() == 81

    def test_empty(self):
        assert regions_to_frame([]).empty


class TestSubRegionsToFrame:
    def test_flattened_in_tree_order(self):
        df = sub_regions_to_frame(aggregate_by_period(RECORDS, "2024-01"))
        assert df["sub_region"].tolist() == ["Kochi", "Panaji", "Margao"]
        assert set(df["intensity"]) <= {"low", "medium", "high"}

    def test_bracket_columns_sum_to_total(self):
        df = sub_regions_to_frame(aggregate_by_period(RECORDS, "2024-01"))
        assert (df["bracket_low"] + df["bracket_mid"] + df["bracket_high"] == df["total"]).all()
