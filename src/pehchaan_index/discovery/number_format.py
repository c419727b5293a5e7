"""Display formatters for counts, periods and shares."""

from __future__ import annotations

from datetime import datetime


def format_number(value: float | int) -> str:
    """Short display form of a count.

    >>> format_number(1_300_000)
    '1.3M'
    >>> format_number(4_500)
    '4.5K'
    >>> format_number(0)
    '0'
    """
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_period(period: str) -> str:
    """``"2024-01"`` -> ``"January 2024"``; unparseable input is returned as-is."""
    try:
        return datetime.strptime(period.strip(), "%Y-%m").strftime("%B %Y")
    except (AttributeError, ValueError):
        return period


def short_month(period: str) -> str:
    """``"2024-01"`` -> ``"Jan"``."""
    return format_period(period).split(" ")[0][:3]


def format_share(part: float, whole: float) -> int:
    """Whole-number percentage of *part* in *whole*; 0 when *whole* is 0."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)
