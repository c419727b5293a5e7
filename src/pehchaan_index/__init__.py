"""Pehchaan Index — update-activity aggregation for the regional dashboard.

Public API:
    parse_csv / load_records   raw CSV -> RawRecord list (+ quarantine)
    aggregate_by_period        records -> region / sub-region summary tree
    top_sub_regions, detect_alerts, generate_recommendations
    build_dashboard            everything above for one period
"""

from __future__ import annotations

from pehchaan_index.discovery.aggregation import (
    RegionSummary,
    SubRegionSummary,
    aggregate_by_period,
    available_periods,
    dominant_bracket,
)
from pehchaan_index.discovery.engine import DashboardSnapshot, build_dashboard
from pehchaan_index.discovery.intensity import classify_intensity
from pehchaan_index.discovery.number_format import format_number
from pehchaan_index.discovery.ranking import detect_alerts, top_sub_regions
from pehchaan_index.discovery.recommendations import generate_recommendations
from pehchaan_index.ingestion.csv_parser import MalformedRowError, RawRecord, parse_csv, parse_records
from pehchaan_index.ingestion.loader import load_records

__all__ = [
    "DashboardSnapshot",
    "MalformedRowError",
    "RawRecord",
    "RegionSummary",
    "SubRegionSummary",
    "aggregate_by_period",
    "available_periods",
    "build_dashboard",
    "classify_intensity",
    "detect_alerts",
    "dominant_bracket",
    "format_number",
    "generate_recommendations",
    "load_records",
    "parse_csv",
    "parse_records",
    "top_sub_regions",
]
