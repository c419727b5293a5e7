"""Ranking and demographic alerts over an aggregated period."""

from __future__ import annotations

from dataclasses import dataclass

from pehchaan_index.discovery.aggregation import RegionSummary, SubRegionSummary
from pehchaan_index.discovery.number_format import format_share

# Alert thresholds, checked in this order; first match wins
CHILD_ALERT_RATIO = 0.40
ADULT_ALERT_RATIO = 0.75
YOUTH_ALERT_RATIO = 0.35


@dataclass(frozen=True)
class DemographicAlert:
    """An unusual age mix in one sub-region."""
    region: str
    sub_region: str
    message: str
    severity: str  # high | medium


def bracket_ratios(item: SubRegionSummary | RegionSummary) -> tuple[float, float, float] | None:
    """(child, youth, adult) shares of the total, or None for a zero total."""
    if item.total <= 0:
        return None
    return (
        item.bracket_low / item.total,
        item.bracket_mid / item.total,
        item.bracket_high / item.total,
    )


def top_sub_regions(regions: list[RegionSummary], limit: int = 5) -> list[SubRegionSummary]:
    """Busiest sub-regions across all regions.

    Sorting is stable, so equal totals keep their tree order.
    """
    flat = [sr for region in regions for sr in region.sub_regions]
    flat.sort(key=lambda sr: sr.total, reverse=True)
    return flat[:limit]


def detect_alerts(regions: list[RegionSummary], limit: int = 5) -> list[DemographicAlert]:
    """Flag sub-regions with a skewed age mix.

    Rules per sub-region (first match wins):
        1. child share > 40%  -> high
        2. adult share > 75%  -> medium
        3. youth share > 35%  -> medium

    Percentages round half up.  Alerts come back in tree traversal order,
    capped at *limit*.
    """
    alerts: list[DemographicAlert] = []
    for region in regions:
        for sr in region.sub_regions:
            ratios = bracket_ratios(sr)
            if ratios is None:
                continue
            child, youth, adult = ratios

            if child > CHILD_ALERT_RATIO:
                pct = format_share(sr.bracket_low, sr.total)
                message, severity = f"High child enrollment ({pct}%)", "high"
            elif adult > ADULT_ALERT_RATIO:
                pct = format_share(sr.bracket_high, sr.total)
                message, severity = f"Adult-heavy updates ({pct}%)", "medium"
            elif youth > YOUTH_ALERT_RATIO:
                pct = format_share(sr.bracket_mid, sr.total)
                message, severity = f"Youth surge detected ({pct}%)", "medium"
            else:
                continue

            alerts.append(DemographicAlert(
                region=region.region,
                sub_region=sr.sub_region,
                message=message,
                severity=severity,
            ))

    return alerts[:limit]
