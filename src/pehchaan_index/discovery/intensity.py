"""Intensity classifier — tertile bucketing against a sibling distribution.

The same raw total can be ``low`` in one period and ``high`` in another;
the class only says where a value sits relative to its siblings.
"""

from __future__ import annotations

import math
from typing import Callable

INTENSITY_LEVELS = ("low", "medium", "high")


def intensity_cut_points(reference_values: list[float]) -> tuple[float, float]:
    """Sorted reference values at indices ``floor(0.33 n)`` and ``floor(0.66 n)``.

    Raises:
        ValueError: If *reference_values* is empty.
    """
    if not reference_values:
        raise ValueError("intensity classification needs a non-empty reference distribution")

    ordered = sorted(reference_values)
    n = len(ordered)
    return ordered[math.floor(n * 0.33)], ordered[math.floor(n * 0.66)]


def _bucket(value: float, p33: float, p66: float) -> str:
    if value <= p33:
        return "low"
    if value <= p66:
        return "medium"
    return "high"


def classify_intensity(value: float, reference_values: list[float]) -> str:
    """Classify *value* as low / medium / high against *reference_values*.

    Comparisons are inclusive, so a value equal to a cut point falls in
    the lower bucket.  The caller's sequence is not modified.

    Raises:
        ValueError: If *reference_values* is empty.
    """
    p33, p66 = intensity_cut_points(reference_values)
    return _bucket(value, p33, p66)


def intensity_classifier(reference_values: list[float]) -> Callable[[float], str]:
    """Classifier bound to one distribution; sorts the reference only once."""
    p33, p66 = intensity_cut_points(reference_values)
    return lambda value: _bucket(value, p33, p66)
