"""Dashboard summary aggregator — KPI tiles and chart series for one period.

Pure functions over the region summary tree (and, for the trend line,
the raw records) that produce what the dashboard cards and charts show.
"""

from __future__ import annotations

from dataclasses import dataclass

from pehchaan_index.discovery.aggregation import RegionSummary, aggregate_by_period
from pehchaan_index.discovery.number_format import format_share, short_month
from pehchaan_index.discovery.ranking import top_sub_regions
from pehchaan_index.ingestion.csv_parser import RawRecord


@dataclass
class SummaryStats:
    """Headline counts for the stat cards."""

    total_updates: int
    total_regions: int
    total_sub_regions: int
    high_activity_count: int  # sub-regions classified "high"


@dataclass
class BracketShare:
    """One slice of the age-bracket pie."""

    label: str
    value: int
    share_pct: int  # whole percent of all updates


@dataclass
class RegionBar:
    """One bar of the region comparison chart."""

    label: str  # truncated for the axis
    full_name: str
    updates: int


@dataclass
class TrendPoint:
    """Total updates for one period."""

    period: str
    label: str  # "Jan"
    updates: int


@dataclass
class HeadlineInsight:
    """The busiest sub-region compared to the period average."""

    sub_region: str
    region: str
    updates: int
    ratio: float  # updates / mean sub-region total
    children_pct: int  # child + youth share of all updates
    avg_updates: float


def compute_summary_stats(regions: list[RegionSummary]) -> SummaryStats:
    total_updates = sum(r.total for r in regions)
    total_sub_regions = sum(len(r.sub_regions) for r in regions)
    high_activity = sum(
        1 for r in regions for sr in r.sub_regions if sr.intensity == "high"
    )
    return SummaryStats(
        total_updates=total_updates,
        total_regions=len(regions),
        total_sub_regions=total_sub_regions,
        high_activity_count=high_activity,
    )


def compute_bracket_breakdown(regions: list[RegionSummary]) -> list[BracketShare]:
    """Children / youth / adult totals with their share of all updates."""
    low = sum(r.bracket_low for r in regions)
    mid = sum(r.bracket_mid for r in regions)
    high = sum(r.bracket_high for r in regions)
    whole = low + mid + high
    return [
        BracketShare("Children (0-5)", low, format_share(low, whole)),
        BracketShare("Youth (5-17)", mid, format_share(mid, whole)),
        BracketShare("Adults (18+)", high, format_share(high, whole)),
    ]


def compute_region_bars(
    regions: list[RegionSummary],
    limit: int = 10,
    max_label: int = 14,
) -> list[RegionBar]:
    """Top regions for the bar chart, long names cut to *max_label* chars."""
    bars: list[RegionBar] = []
    for r in regions[:limit]:
        label = r.region if len(r.region) <= max_label else r.region[:max_label] + "..."
        bars.append(RegionBar(label=label, full_name=r.region, updates=r.total))
    return bars


def compute_trend(
    records: list[RawRecord],
    periods: list[str],
    window: int = 6,
) -> list[TrendPoint]:
    """Total updates for the newest *window* periods, oldest first.

    *periods* is expected newest first, as returned by
    ``available_periods``.
    """
    points: list[TrendPoint] = []
    for period in reversed(periods[:window]):
        regions = aggregate_by_period(records, period)
        points.append(TrendPoint(
            period=period,
            label=short_month(period),
            updates=sum(r.total for r in regions),
        ))
    return points


def compute_headline_insight(regions: list[RegionSummary]) -> HeadlineInsight | None:
    """Busiest sub-region and how far above average it sits.

    Returns None when the period has no data.
    """
    top = top_sub_regions(regions, limit=1)
    if not top:
        return None

    stats = compute_summary_stats(regions)
    avg_updates = stats.total_updates / max(stats.total_sub_regions, 1)
    ratio = top[0].total / avg_updates if avg_updates > 0 else 0.0

    breakdown = compute_bracket_breakdown(regions)
    whole = sum(b.value for b in breakdown)
    children_pct = format_share(breakdown[0].value + breakdown[1].value, whole)

    return HeadlineInsight(
        sub_region=top[0].sub_region,
        region=top[0].region,
        updates=top[0].total,
        ratio=ratio,
        children_pct=children_pct,
        avg_updates=avg_updates,
    )
