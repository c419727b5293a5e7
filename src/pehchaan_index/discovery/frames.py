"""pandas exports of records and summaries for chart and notebook use."""
from __future__ import annotations

import pandas as pd

from pehchaan_index.discovery.aggregation import RegionSummary
from pehchaan_index.ingestion.csv_parser import RawRecord

_BRACKET_COLUMNS = ["bracket_low", "bracket_mid", "bracket_high"]

_RECORD_COLUMNS = ["period", "region", "sub_region", *_BRACKET_COLUMNS, "total"]
_REGION_COLUMNS = [
    "region", *_BRACKET_COLUMNS, "total", "sub_region_count", "dominant_bracket", "intensity",
]
_SUB_REGION_COLUMNS = [
    "region", "sub_region", *_BRACKET_COLUMNS, "total", "dominant_bracket", "intensity",
]


def records_to_frame(records: list[RawRecord]) -> pd.DataFrame:
    """One row per parsed record, input order."""
    rows = [
        {
            "period": r.period,
            "region": r.region,
            "sub_region": r.sub_region,
            "bracket_low": r.bracket_low,
            "bracket_mid": r.bracket_mid,
            "bracket_high": r.bracket_high,
            "total": r.total,
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=_RECORD_COLUMNS)


def regions_to_frame(regions: list[RegionSummary]) -> pd.DataFrame:
    """One row per region, in summary order (total descending)."""
    rows = [
        {
            "region": r.region,
            "bracket_low": r.bracket_low,
            "bracket_mid": r.bracket_mid,
            "bracket_high": r.bracket_high,
            "total": r.total,
            "sub_region_count": len(r.sub_regions),
            "dominant_bracket": r.dominant_bracket,
            "intensity": r.intensity,
        }
        for r in regions
    ]
    return pd.DataFrame(rows, columns=_REGION_COLUMNS)


def sub_regions_to_frame(regions: list[RegionSummary]) -> pd.DataFrame:
    """One row per sub-region summary, flattened in tree order."""
    rows = [
        {
            "region": r.region,
            "sub_region": sr.sub_region,
            "bracket_low": sr.bracket_low,
            "bracket_mid": sr.bracket_mid,
            "bracket_high": sr.bracket_high,
            "total": sr.total,
            "dominant_bracket": sr.dominant_bracket,
            "intensity": sr.intensity,
        }
        for r in regions
        for sr in r.sub_regions
    ]
    return pd.DataFrame(rows, columns=_SUB_REGION_COLUMNS)
