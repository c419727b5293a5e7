"""Period aggregation — region / sub-region summary tree for one month.

Pure functions that group parsed records by region for a selected period,
sum the age-bracket counts, label the dominant bracket and attach a
population-relative intensity class.  No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from pehchaan_index.discovery.intensity import intensity_classifier
from pehchaan_index.ingestion.csv_parser import RawRecord

ADULT_LABEL = "Adult (18+)"
YOUTH_LABEL = "Youth (5-17)"
CHILD_LABEL = "Child (0-5)"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SubRegionSummary:
    """One input row for the period, with derived labels."""

    sub_region: str
    region: str
    total: int
    bracket_low: int
    bracket_mid: int
    bracket_high: int
    dominant_bracket: str
    intensity: str  # low | medium | high, relative to all sub-regions in the period


@dataclass(frozen=True)
class RegionSummary:
    """All sub-region rows of one region for the period."""

    region: str
    total: int
    bracket_low: int
    bracket_mid: int
    bracket_high: int
    sub_regions: tuple[SubRegionSummary, ...] = ()  # first-seen order
    dominant_bracket: str = ADULT_LABEL
    intensity: str = "low"  # relative to all regions in the period


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def dominant_bracket(low: int, mid: int, high: int) -> str:
    """Label of the largest bracket; ties go to the older bracket.

    >>> dominant_bracket(10, 10, 10)
    'Adult (18+)'
    >>> dominant_bracket(10, 10, 5)
    'Youth (5-17)'
    """
    largest = max(low, mid, high)
    if high == largest:
        return ADULT_LABEL
    if mid == largest:
        return YOUTH_LABEL
    return CHILD_LABEL


def aggregate_by_period(records: list[RawRecord], period: str) -> list[RegionSummary]:
    """Build the region summary tree for *period*.

    Every matching record becomes its own sub-region entry (repeated
    sub-region rows are not merged).  Intensity is assigned in a second
    pass once the full distribution of the period is known: sub-regions
    against all sub-region totals, regions against all region totals.

    Args:
        records: Parsed records, any periods.
        period: Exact ``YYYY-MM`` string to select.

    Returns:
        Region summaries sorted by total descending (stable on ties).
        Empty list if no record matches *period*.
    """
    # Pass 1: accumulate per region in first-seen order
    region_data: dict[str, dict] = {}
    for rec in records:
        if rec.period != period:
            continue
        entry = region_data.setdefault(rec.region, {"low": 0, "mid": 0, "high": 0, "rows": []})
        entry["low"] += rec.bracket_low
        entry["mid"] += rec.bracket_mid
        entry["high"] += rec.bracket_high
        entry["rows"].append(rec)

    if not region_data:
        return []

    classify_region = intensity_classifier(
        [e["low"] + e["mid"] + e["high"] for e in region_data.values()]
    )
    classify_sub_region = intensity_classifier(
        [rec.total for e in region_data.values() for rec in e["rows"]]
    )

    # Pass 2: classify against the complete distributions
    regions: list[RegionSummary] = []
    for region_name, entry in region_data.items():
        sub_regions = tuple(
            SubRegionSummary(
                sub_region=rec.sub_region,
                region=region_name,
                total=rec.total,
                bracket_low=rec.bracket_low,
                bracket_mid=rec.bracket_mid,
                bracket_high=rec.bracket_high,
                dominant_bracket=dominant_bracket(rec.bracket_low, rec.bracket_mid, rec.bracket_high),
                intensity=classify_sub_region(rec.total),
            )
            for rec in entry["rows"]
        )
        total = entry["low"] + entry["mid"] + entry["high"]
        regions.append(RegionSummary(
            region=region_name,
            total=total,
            bracket_low=entry["low"],
            bracket_mid=entry["mid"],
            bracket_high=entry["high"],
            sub_regions=sub_regions,
            dominant_bracket=dominant_bracket(entry["low"], entry["mid"], entry["high"]),
            intensity=classify_region(total),
        ))

    regions.sort(key=lambda r: r.total, reverse=True)
    return regions


def available_periods(records: list[RawRecord]) -> list[str]:
    """Distinct periods in the input, newest first."""
    return sorted({rec.period for rec in records}, reverse=True)
