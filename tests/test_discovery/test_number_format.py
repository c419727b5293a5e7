"""Tests for display formatters."""

from pehchaan_index.discovery.number_format import (
    format_number,
    format_period,
    format_share,
    short_month,
)


class TestFormatNumber:
    def test_zero(self):
        assert format_number(0) == "0"

    def test_below_thousand(self):
        assert format_number(999) == "999"

    def test_thousand(self):
        assert format_number(1000) == "1.0K"

    def test_thousands(self):
        assert format_number(45_600) == "45.6K"

    def test_million(self):
        assert format_number(1_000_000) == "1.0M"

    def test_millions(self):
        assert format_number(12_340_000) == "12.3M"

    def test_whole_float(self):
        assert format_number(12.0) == "12"


class TestFormatPeriod:
    def test_month_year(self):
        assert format_period("2024-01") == "January 2024"

    def test_december(self):
        assert format_period("2023-12") == "December 2023"

    def test_unparseable_passthrough(self):
        assert format_period("soon") == "soon"

    def test_short_month(self):
        assert short_month("2024-09") == "Sep"


class TestFormatShare:
    def test_third(self):
        assert format_share(1, 3) == 33

    def test_rounds_half_up(self):
        assert format_share(1, 8) == 13

    def test_two_thirds(self):
        assert format_share(2, 3) == 67

    def test_zero_whole(self):
        assert format_share(0, 0) == 0
