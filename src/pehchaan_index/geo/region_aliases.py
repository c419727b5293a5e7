"""Region name join layer between engine output and map geometry.

Geometry datasets use older or official spellings for some states
(``Orissa``, ``Uttaranchal``, ``NCT of Delhi``).  The aggregation engine
keeps whatever names appear in the input; resolution happens here, at
lookup time.
"""

from __future__ import annotations

from pehchaan_index.discovery.aggregation import RegionSummary
from pehchaan_index.ingestion.csv_parser import normalize_case

# alternate / geometry name -> canonical name
REGION_ALIASES: dict[str, str] = {
    "Andaman and Nicobar": "Andaman and Nicobar",
    "Andhra Pradesh": "Andhra Pradesh",
    "Arunachal Pradesh": "Arunachal Pradesh",
    "Assam": "Assam",
    "Bihar": "Bihar",
    "Chandigarh": "Chandigarh",
    "Chhattisgarh": "Chhattisgarh",
    "Dadra and Nagar Haveli": "Dadra and Nagar Haveli",
    "Daman and Diu": "Daman and Diu",
    "Delhi": "Delhi",
    "NCT of Delhi": "Delhi",
    "Goa": "Goa",
    "Gujarat": "Gujarat",
    "Haryana": "Haryana",
    "Himachal Pradesh": "Himachal Pradesh",
    "Jammu and Kashmir": "Jammu and Kashmir",
    "Jharkhand": "Jharkhand",
    "Karnataka": "Karnataka",
    "Kerala": "Kerala",
    "Lakshadweep": "Lakshadweep",
    "Madhya Pradesh": "Madhya Pradesh",
    "Maharashtra": "Maharashtra",
    "Manipur": "Manipur",
    "Meghalaya": "Meghalaya",
    "Mizoram": "Mizoram",
    "Nagaland": "Nagaland",
    "Odisha": "Odisha",
    "Orissa": "Odisha",
    "Puducherry": "Puducherry",
    "Punjab": "Punjab",
    "Rajasthan": "Rajasthan",
    "Sikkim": "Sikkim",
    "Tamil Nadu": "Tamil Nadu",
    "Telangana": "Telangana",
    "Tripura": "Tripura",
    "Uttar Pradesh": "Uttar Pradesh",
    "Uttarakhand": "Uttarakhand",
    "Uttaranchal": "Uttarakhand",
    "West Bengal": "West Bengal",
    "Ladakh": "Ladakh",
}

# Keys and targets in the same casing the parser gives region names
_NORMALIZED_ALIASES: dict[str, str] = {
    normalize_case(alias): normalize_case(target) for alias, target in REGION_ALIASES.items()
}


def canonical_region_name(name: str) -> str:
    """Canonical spelling for *name* in parser casing.

    The name is case-normalized first, so ``"Jammu and Kashmir"``,
    ``"JAMMU AND KASHMIR"`` and ``"Jammu And Kashmir"`` resolve alike.
    Unknown names pass through with normalized casing.
    """
    key = normalize_case(name)
    return _NORMALIZED_ALIASES.get(key, key)


def index_regions(regions: list[RegionSummary]) -> dict[str, RegionSummary]:
    """Region summaries keyed by region name."""
    return {r.region: r for r in regions}


def lookup_region(index: dict[str, RegionSummary], geo_name: str) -> RegionSummary | None:
    """Summary for a geometry feature name, after alias resolution."""
    return index.get(canonical_region_name(geo_name))
