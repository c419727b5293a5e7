"""Dashboard engine — recomputes every derived view for one period.

The caller re-invokes ``build_dashboard`` whenever the selected period or
the record set changes; each call returns a fresh snapshot and nothing
is carried over between calls.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from config.settings import settings
from pehchaan_index.discovery.aggregation import (
    RegionSummary,
    SubRegionSummary,
    aggregate_by_period,
    available_periods,
)
from pehchaan_index.discovery.dashboard_summary import (
    BracketShare,
    HeadlineInsight,
    RegionBar,
    SummaryStats,
    TrendPoint,
    compute_bracket_breakdown,
    compute_headline_insight,
    compute_region_bars,
    compute_summary_stats,
    compute_trend,
)
from pehchaan_index.discovery.number_format import format_number, format_period
from pehchaan_index.discovery.ranking import DemographicAlert, detect_alerts, top_sub_regions
from pehchaan_index.discovery.recommendations import Recommendation, generate_recommendations
from pehchaan_index.ingestion.csv_parser import RawRecord

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    """Everything the dashboard renders for one period."""

    period: str
    period_label: str
    periods: list[str]  # newest first
    regions: list[RegionSummary]
    stats: SummaryStats
    total_updates_display: str
    bracket_breakdown: list[BracketShare]
    region_bars: list[RegionBar]
    top_sub_regions: list[SubRegionSummary]
    alerts: list[DemographicAlert]
    recommendations: list[Recommendation]
    trend: list[TrendPoint]
    headline: HeadlineInsight | None = None
    meta: dict = field(default_factory=dict)


def _elapsed_ms(t0: float) -> int:
    return int((time.monotonic() - t0) * 1000)


def build_dashboard(records: list[RawRecord], period: str | None = None) -> DashboardSnapshot:
    """Aggregate, rank, alert and recommend for *period*.

    Args:
        records: Parsed records.
        period: ``YYYY-MM`` to show. Defaults to the newest period present.

    Returns:
        DashboardSnapshot.  An unknown period gives empty regions and lists
        with a total of ``"0"``.
    """
    t0 = time.monotonic()
    periods = available_periods(records)
    if period is None:
        period = periods[0] if periods else ""

    regions = aggregate_by_period(records, period) if period else []
    stats = compute_summary_stats(regions)

    snapshot = DashboardSnapshot(
        period=period,
        period_label=format_period(period) if period else "",
        periods=periods,
        regions=regions,
        stats=stats,
        total_updates_display=format_number(stats.total_updates),
        bracket_breakdown=compute_bracket_breakdown(regions),
        region_bars=compute_region_bars(regions, limit=settings.region_bar_limit),
        top_sub_regions=top_sub_regions(regions, limit=settings.top_sub_region_limit),
        alerts=detect_alerts(regions, limit=settings.alert_limit),
        recommendations=generate_recommendations(
            regions, period, limit=settings.recommendation_limit,
        ),
        trend=compute_trend(records, periods, window=settings.trend_window),
        headline=compute_headline_insight(regions),
    )
    snapshot.meta = {"duration_ms": _elapsed_ms(t0), "record_count": len(records)}

    logger.info(
        "Dashboard %s: %d regions, %d sub-regions, %d alerts, %d recommendations (%d ms)",
        period or "<none>", stats.total_regions, stats.total_sub_regions,
        len(snapshot.alerts), len(snapshot.recommendations), snapshot.meta["duration_ms"],
    )
    return snapshot
