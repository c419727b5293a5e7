"""Tests for dashboard summary stats and chart series."""

from pehchaan_index.discovery.aggregation import aggregate_by_period
from pehchaan_index.discovery.dashboard_summary import (
    BracketShare,
    compute_bracket_breakdown,
    compute_headline_insight,
    compute_region_bars,
    compute_summary_stats,
    compute_trend,
)
from pehchaan_index.ingestion.csv_parser import RawRecord


def _rec(region, sub_region, low, mid, high, period="2024-01"):
    return RawRecord(period, region, sub_region, low, mid, high)


def _make_records():
    return [
        _rec("Kerala", "Kochi", 100, 100, 300),
        _rec("Kerala", "Thrissur", 20, 30, 50),
        _rec("Dadra and Nagar Haveli", "Silvassa", 10, 10, 30),
        _rec("Goa", "Panaji", 5, 5, 10),
        _rec("Goa", "Margao", 2, 3, 5),
        _rec("Kerala", "Kochi", 50, 50, 100, period="2023-12"),
        _rec("Kerala", "Kochi", 10, 10, 10, period="2023-11"),
    ]


def _regions():
    return aggregate_by_period(_make_records(), "2024-01")


class TestComputeSummaryStats:
    def test_counts(self):
        stats = compute_summary_stats(_regions())
        assert stats.total_updates == 680
        assert stats.total_regions == 3
        assert stats.total_sub_regions == 5

    def test_high_activity(self):
        # sub-region totals sorted [10, 20, 50, 100, 500] -> cut66 = 100
        assert compute_summary_stats(_regions()).high_activity_count == 1

    def test_empty(self):
        stats = compute_summary_stats([])
        assert stats.total_updates == 0
        assert stats.total_regions == 0
        assert stats.high_activity_count == 0


class TestComputeBracketBreakdown:
    def test_values_and_labels(self):
        breakdown = compute_bracket_breakdown(_regions())
        assert [b.label for b in breakdown] == ["Children (0-5)", "Youth (5-17)", "Adults (18+)"]
        assert [b.value for b in breakdown] == [137, 148, 395]

    def test_shares(self):
        breakdown = compute_bracket_breakdown(_regions())
        assert [b.share_pct for b in breakdown] == [20, 22, 58]

    def test_empty(self):
        assert compute_bracket_breakdown([]) == [
            BracketShare("Children (0-5)", 0, 0),
            BracketShare("Youth (5-17)", 0, 0),
            BracketShare("Adults (18+)", 0, 0),
        ]


class TestComputeRegionBars:
    def test_order_follows_totals(self):
        bars = compute_region_bars(_regions())
        assert [b.full_name for b in bars] == ["Kerala", "Dadra and Nagar Haveli", "Goa"]
        assert bars[0].updates == 600

    def test_long_names_truncated(self):
        bars = compute_region_bars(_regions())
        assert bars[1].label == "Dadra and Naga..."
        assert bars[0].label == "Kerala"

    def test_limit(self):
        assert len(compute_region_bars(_regions(), limit=2)) == 2


class TestComputeTrend:
    def test_oldest_first(self):
        periods = ["2024-01", "2023-12", "2023-11"]
        trend = compute_trend(_make_records(), periods)
        assert [t.period for t in trend] == ["2023-11", "2023-12", "2024-01"]
        assert [t.label for t in trend] == ["Nov", "Dec", "Jan"]
        assert [t.updates for t in trend] == [30, 200, 680]

    def test_window(self):
        periods = ["2024-01", "2023-12", "2023-11"]
        trend = compute_trend(_make_records(), periods, window=2)
        assert [t.period for t in trend] == ["2023-12", "2024-01"]

    def test_no_periods(self):
        assert compute_trend(_make_records(), []) == []


class TestComputeHeadlineInsight:
    def test_top_sub_region(self):
        headline = compute_headline_insight(_regions())
        assert headline.sub_region == "Kochi"
        assert headline.region == "Kerala"
        assert headline.updates == 500

    def test_ratio_to_average(self):
        headline = compute_headline_insight(_regions())
        assert headline.avg_updates == 136.0
        assert round(headline.ratio, 2) == 3.68

    def test_children_share(self):
        # (137 + 148) / 680 = 41.9%
        assert compute_headline_insight(_regions()).children_pct == 42

    def test_empty(self):
        assert compute_headline_insight([]) is None
