"""CSV text → RawRecord parsing with row quarantine.

Turns the raw update-activity export (month, state, district and three
age-bracket counts) into typed, name-normalized records.

Rows that fail hard checks are quarantined rather than loaded:
    - Fewer than six fields
    - Empty period / region / sub-region
    - A bracket count that is not a non-negative base-10 integer

Blank lines are skipped silently.  With ``strict=True`` the first
malformed row raises :class:`MalformedRowError` instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_FIELD_COUNT = 6
_INT_RE = re.compile(r"^[+-]?[0-9]+$")


class MalformedRowError(ValueError):
    """Raised in strict mode when a data row fails validation."""

    def __init__(self, line_number: int, issues: list[str]) -> None:
        self.line_number = line_number
        self.issues = issues
        super().__init__(f"Malformed row at line {line_number}: {'; '.join(issues)}")


@dataclass(frozen=True)
class RawRecord:
    """One parsed input row."""

    period: str  # YYYY-MM
    region: str
    sub_region: str
    bracket_low: int  # age 0-5
    bracket_mid: int  # age 5-17
    bracket_high: int  # age 18+

    @property
    def total(self) -> int:
        return self.bracket_low + self.bracket_mid + self.bracket_high


@dataclass
class ParseResult:
    """Accepted records plus the rows that were quarantined."""

    records: list[RawRecord] = field(default_factory=list)
    quarantined: list[dict] = field(default_factory=list)  # [{line_number, line, issues}]

    def summary(self) -> dict:
        return {
            "rows_loaded": len(self.records),
            "rows_quarantined": len(self.quarantined),
        }


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line, honouring double-quoted fields.

    A double quote toggles the in-quotes state and is dropped; commas only
    separate fields outside quotes.  Every field is stripped afterwards.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def normalize_case(name: str) -> str:
    """Lower-case *name*, then capitalize the first character of each word.

    >>> normalize_case("UTTAR PRADESH")
    'Uttar Pradesh'
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.lower().split(" "))


def _safe_int(value: str) -> int | None:
    """Parse a base-10 integer, or None if *value* is not one."""
    if value is None:
        return None
    s = str(value).strip()
    if not _INT_RE.match(s):
        return None
    return int(s)


def _check_row(fields: list[str]) -> tuple[list[str], list[int]]:
    """Return (issues, bracket counts) for one split row."""
    issues: list[str] = []
    if len(fields) < _FIELD_COUNT:
        issues.append(f"expected {_FIELD_COUNT} fields, got {len(fields)}")
        return issues, []

    for idx, name in enumerate(("period", "region", "sub_region")):
        if not fields[idx]:
            issues.append(f"empty {name}")

    counts: list[int] = []
    for idx, name in enumerate(("bracket_low", "bracket_mid", "bracket_high"), start=3):
        value = _safe_int(fields[idx])
        if value is None:
            issues.append(f"{name} is not an integer ({fields[idx]!r})")
        elif value < 0:
            issues.append(f"{name} is negative ({value})")
        else:
            counts.append(value)

    return issues, counts


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_csv(raw_text: str, strict: bool = False) -> ParseResult:
    """Parse the full CSV payload.

    Args:
        raw_text: Newline-delimited text; the first line is a header.
        strict: Raise on the first malformed row instead of quarantining it.

    Returns:
        ParseResult with records in input line order.
    """
    result = ParseResult()
    lines = raw_text.strip().split("\n")

    for line_number, raw_line in enumerate(lines[1:], start=2):
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue

        fields = split_csv_line(line)
        issues, counts = _check_row(fields)
        if issues:
            if strict:
                raise MalformedRowError(line_number, issues)
            logger.warning("Quarantined line %d: %s", line_number, "; ".join(issues))
            result.quarantined.append({
                "line_number": line_number,
                "line": line,
                "issues": issues,
            })
            continue

        result.records.append(RawRecord(
            period=fields[0],
            region=normalize_case(fields[1]),
            sub_region=normalize_case(fields[2]),
            bracket_low=counts[0],
            bracket_mid=counts[1],
            bracket_high=counts[2],
        ))

    if result.quarantined:
        logger.info(
            "Parsed %d records, quarantined %d rows",
            len(result.records), len(result.quarantined),
        )
    return result


def parse_records(raw_text: str, strict: bool = False) -> list[RawRecord]:
    """Shortcut for ``parse_csv(...).records``."""
    return parse_csv(raw_text, strict=strict).records
