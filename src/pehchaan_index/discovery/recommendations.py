"""Recommendation generator — heuristic actions for high-intensity sub-regions.

Two sources:
  Rule-based: reasons and actions derived from each high-intensity
      sub-region's volume and age mix (``generate_recommendations``).
  Placeholder pool: fixed suggestion sets shown while richer insights
      load (``fallback_suggestion``).  The caller picks the index, so
      randomness and timing stay in the presentation layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pehchaan_index.discovery.aggregation import RegionSummary
from pehchaan_index.discovery.number_format import format_period
from pehchaan_index.discovery.ranking import bracket_ratios

logger = logging.getLogger(__name__)

_HIGH_IMPACT = "~25–35% load normalization"
_MEDIUM_IMPACT = "~15–20% efficiency improvement"
_DEFAULT_ACTIONS = ["Monitor situation closely"]


@dataclass
class Recommendation:
    """Suggested intervention for one sub-region."""
    severity: str  # high | medium
    location: str  # "Sub-region, Region"
    period_label: str  # "January 2024"
    reasons: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    expected_impact: str = ""


@dataclass(frozen=True)
class FallbackSuggestion:
    """Generic placeholder reasons and actions."""
    why_reasons: tuple[str, ...]
    actions: tuple[str, ...]


# ---------------------------------------------------------------------------
# Rule-based recommendations
# ---------------------------------------------------------------------------


def recommendation_severity(total: float, avg_total: float) -> str:
    """``high`` above twice the period average, else ``medium``."""
    return "high" if total > avg_total * 2 else "medium"


def generate_recommendations(
    regions: list[RegionSummary],
    period: str,
    limit: int = 4,
) -> list[Recommendation]:
    """Build recommendations for the high-intensity sub-regions of a period.

    Rules applied independently to each candidate:
        - total > 1.5x its region's mean sub-region total
        - adult share > 65%
        - child share > 25%
        - youth share > 30%
        - total > 1.5x the period-wide mean adds capacity actions

    A sub-region with no reason is skipped.  High severity items come
    first, original order otherwise, truncated to *limit*.
    """
    all_totals = [sr.total for region in regions for sr in region.sub_regions]
    if not all_totals:
        return []
    avg_total = sum(all_totals) / len(all_totals)
    period_label = format_period(period)

    recommendations: list[Recommendation] = []
    for region in regions:
        region_mean = sum(sr.total for sr in region.sub_regions) / len(region.sub_regions)

        for sr in region.sub_regions:
            if sr.intensity != "high":
                continue
            ratios = bracket_ratios(sr)
            if ratios is None:
                continue
            child, youth, adult = ratios

            reasons: list[str] = []
            actions: list[str] = []

            if region_mean > 0:
                multiplier = f"{sr.total / region_mean:.1f}"
                if float(multiplier) > 1.5:
                    reasons.append(f"{multiplier}× region median update volume")

            if adult > 0.65:
                reasons.append("Adult-heavy demographic skew")
                actions.append("Extended update windows")
                actions.append("Priority processing for biometric updates")
            if child > 0.25:
                reasons.append("High child enrollment activity")
                actions.append("School-based enrollment camps")
                actions.append("Parent awareness campaigns")
            if youth > 0.30:
                reasons.append("Youth update surge")
                actions.append("College enrollment integration")

            if sr.total > avg_total * 1.5:
                actions.append("Temporary capacity expansion")
                actions.append("Targeted awareness campaigns")

            if not reasons:
                continue

            severity = recommendation_severity(sr.total, avg_total)
            recommendations.append(Recommendation(
                severity=severity,
                location=f"{sr.sub_region}, {region.region}",
                period_label=period_label,
                reasons=reasons,
                actions=actions or list(_DEFAULT_ACTIONS),
                expected_impact=_HIGH_IMPACT if severity == "high" else _MEDIUM_IMPACT,
            ))

    recommendations.sort(key=lambda r: 0 if r.severity == "high" else 1)
    logger.debug(
        "Generated %d recommendations for %s (keeping %d)",
        len(recommendations), period, min(len(recommendations), limit),
    )
    return recommendations[:limit]


# ---------------------------------------------------------------------------
# Placeholder pool
# ---------------------------------------------------------------------------

FALLBACK_SUGGESTIONS: tuple[FallbackSuggestion, ...] = (
    FallbackSuggestion(
        why_reasons=(
            "High population density in the region leading to increased service demand",
            "Recent government mandate requiring Aadhaar updates for welfare schemes",
            "Migration patterns causing address change requirements",
        ),
        actions=(
            "Deploy additional mobile enrollment units to the district",
            "Extend operating hours at existing Aadhaar centers",
            "Set up temporary camps in high-traffic areas",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "Upcoming elections requiring updated voter ID linkage",
            "Bank account linking deadlines approaching",
            "School enrollment season requiring child Aadhaar updates",
        ),
        actions=(
            "Coordinate with local banks for on-site enrollment drives",
            "Partner with schools for children Aadhaar camps",
            "Increase awareness campaigns about update procedures",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "New biometric update requirements for senior citizens",
            "SIM card re-verification drives by telecom operators",
            "Healthcare scheme registrations requiring Aadhaar linkage",
        ),
        actions=(
            "Set up dedicated counters for elderly residents",
            "Collaborate with telecom providers for joint camps",
            "Streamline document verification process",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "Post-pandemic recovery leading to delayed updates catching up",
            "New housing developments requiring fresh address registrations",
            "LPG subsidy scheme updates requiring Aadhaar verification",
        ),
        actions=(
            "Prioritize address update requests to reduce backlog",
            "Deploy staff to new residential areas",
            "Coordinate with gas agencies for bulk processing",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "Employment verification requirements from IT sector companies",
            "Passport application surge requiring Aadhaar updates",
            "Insurance policy linkage deadlines approaching",
        ),
        actions=(
            "Set up corporate enrollment partnerships",
            "Coordinate with passport offices for integrated services",
            "Extend weekend operations at major centers",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "Agricultural subsidy disbursement requiring farmer Aadhaar updates",
            "Rural employment guarantee scheme registrations",
            "Seasonal migration patterns from agricultural regions",
        ),
        actions=(
            "Deploy mobile vans to rural and farming communities",
            "Coordinate with agriculture department for farmer camps",
            "Set up enrollment points at mandis and agricultural markets",
        ),
    ),
    FallbackSuggestion(
        why_reasons=(
            "Marriage registrations leading to name change updates",
            "College admission season requiring student verification",
            "Property registration mandates requiring Aadhaar proof",
        ),
        actions=(
            "Expedite name change request processing",
            "Partner with universities for student enrollment drives",
            "Set up counters at sub-registrar offices",
        ),
    ),
)


def fallback_suggestion(index: int) -> FallbackSuggestion:
    """Pick a placeholder suggestion; *index* wraps around the pool."""
    return FALLBACK_SUGGESTIONS[index % len(FALLBACK_SUGGESTIONS)]
