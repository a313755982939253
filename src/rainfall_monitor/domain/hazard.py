"""Hazard classification and assessment for rainfall intensity.

Pure computational utilities (no I/O). Intensity in mm/hr is mapped to one
of four ordered hazard levels, and each level to a fixed assessment record
(display color token, description and ordered recommendations).
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

__all__ = [
    "HazardLevel",
    "HazardAssessment",
    "HAZARD_ASSESSMENTS",
    "HAZARD_SCALE",
    "classify_hazard",
    "assess_hazard",
    "hazard_scale",
    "risk_percentage",
    "css_color",
]

CRITICAL_INTENSITY_MMHR = 50.0
HIGH_INTENSITY_MMHR = 10.0
MEDIUM_INTENSITY_MMHR = 2.5


def is_finite(value: float) -> bool:
    """`math.isfinite` that accepts ints too large for a float (they are finite)."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return True


class SeverityEnum(str, Enum):
    """String enum ordered by ``severity`` rather than by its text.

    Plain strings are coerced to the enum before comparing; strings that name
    no member raise TypeError instead of falling back to lexical order.
    """

    @property
    def severity(self) -> int:
        raise NotImplementedError

    def _other_severity(self, other):
        cls = type(self)
        if isinstance(other, cls):
            return other.severity
        if isinstance(other, Enum) or not isinstance(other, str):
            return NotImplemented
        try:
            return cls(other).severity
        except ValueError:
            raise TypeError(f"cannot compare {cls.__name__} with {other!r}") from None

    def __lt__(self, other):
        rank = self._other_severity(other)
        return rank if rank is NotImplemented else self.severity < rank

    def __le__(self, other):
        rank = self._other_severity(other)
        return rank if rank is NotImplemented else self.severity <= rank

    def __gt__(self, other):
        rank = self._other_severity(other)
        return rank if rank is NotImplemented else self.severity > rank

    def __ge__(self, other):
        rank = self._other_severity(other)
        return rank if rank is NotImplemented else self.severity >= rank


class HazardLevel(SeverityEnum):
    """Region-wide rainfall severity, ordered low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        return _HAZARD_SEVERITY[self]


_HAZARD_SEVERITY = {
    HazardLevel.LOW: 0,
    HazardLevel.MEDIUM: 1,
    HazardLevel.HIGH: 2,
    HazardLevel.CRITICAL: 3,
}


def css_color(token: str) -> str:
    """Render a theme color token (e.g. ``chart-2``) as a CSS color."""
    return f"hsl(var(--{token}))"


class HazardAssessment(BaseModel):
    """Display bundle for one hazard level. Instances are shared and frozen."""

    model_config = ConfigDict(frozen=True)

    level: HazardLevel
    color: str
    description: str
    recommendations: Tuple[str, ...]

    @property
    def css_color(self) -> str:
        return css_color(self.color)

    def numbered_recommendations(self) -> List[str]:
        return [f"{n}. {text}" for n, text in enumerate(self.recommendations, start=1)]


HAZARD_ASSESSMENTS: Dict[HazardLevel, HazardAssessment] = {
    HazardLevel.LOW: HazardAssessment(
        level=HazardLevel.LOW,
        color="chart-2",  # green
        description="Light rainfall - Normal conditions",
        recommendations=(
            "No immediate action required",
            "Continue normal operations",
            "Monitor weather updates",
        ),
    ),
    HazardLevel.MEDIUM: HazardAssessment(
        level=HazardLevel.MEDIUM,
        color="chart-4",  # yellow
        description="Moderate rainfall - Stay alert",
        recommendations=(
            "Monitor drainage systems",
            "Prepare emergency equipment",
            "Stay informed of weather updates",
            "Avoid low-lying areas if possible",
        ),
    ),
    HazardLevel.HIGH: HazardAssessment(
        level=HazardLevel.HIGH,
        color="chart-3",  # orange
        description="Heavy rainfall - Take precautions",
        recommendations=(
            "Activate emergency response teams",
            "Evacuate low-lying areas",
            "Close flood-prone roads",
            "Prepare shelters and supplies",
            "Issue public warnings",
        ),
    ),
    HazardLevel.CRITICAL: HazardAssessment(
        level=HazardLevel.CRITICAL,
        color="destructive",  # red
        description="Extreme rainfall - Emergency situation",
        recommendations=(
            "IMMEDIATE EVACUATION of danger zones",
            "Deploy all emergency services",
            "Close all affected roads and bridges",
            "Open emergency shelters",
            "Issue emergency broadcast alerts",
            "Coordinate with disaster management",
        ),
    ),
}

# (level, label, range text, short description) in ascending severity
HAZARD_SCALE: Tuple[Tuple[HazardLevel, str, str, str], ...] = (
    (HazardLevel.LOW, "Low", "< 2.5 mm/hr", "Light rainfall"),
    (HazardLevel.MEDIUM, "Medium", "2.5-10 mm/hr", "Moderate rainfall"),
    (HazardLevel.HIGH, "High", "10-50 mm/hr", "Heavy rainfall"),
    (HazardLevel.CRITICAL, "Critical", "> 50 mm/hr", "Extreme rainfall"),
)


def classify_hazard(intensity: float) -> HazardLevel:
    """Classify rainfall intensity (mm/hr) into a hazard level.

    Thresholds are inclusive lower bounds checked from the most severe down.
    Non-finite input (NaN, +/-inf) is classified as ``low``; integers too
    large for a float are finite and land in the top bucket.
    """
    if not is_finite(intensity):
        return HazardLevel.LOW
    if intensity >= CRITICAL_INTENSITY_MMHR:
        return HazardLevel.CRITICAL
    if intensity >= HIGH_INTENSITY_MMHR:
        return HazardLevel.HIGH
    if intensity >= MEDIUM_INTENSITY_MMHR:
        return HazardLevel.MEDIUM
    return HazardLevel.LOW


def assess_hazard(intensity: float, rainfall_total: float = 0.0) -> HazardAssessment:
    """Return the fixed assessment for the hazard level of ``intensity``.

    Parameters
    ----------
    intensity : float
        Rainfall intensity in mm/hr; the only input that selects the level.
    rainfall_total : float, default 0.0
        Total rainfall in mm. Accepted so callers can pass the full reading;
        it does not affect the selected level or the returned record.

    Returns
    -------
    HazardAssessment
        The shared, immutable table entry for the level.
    """
    return HAZARD_ASSESSMENTS[classify_hazard(intensity)]


def risk_percentage(intensity: float) -> float:
    """Intensity as a share of the critical threshold, clamped to [0, 100]."""
    if not is_finite(intensity):
        return 0.0
    if intensity >= CRITICAL_INTENSITY_MMHR:
        return 100.0
    return max(0.0, min(intensity / CRITICAL_INTENSITY_MMHR * 100.0, 100.0))


def hazard_scale(intensity: float) -> List[Dict]:
    """Ordered hazard scale rows with the row for ``intensity`` marked current."""
    current = classify_hazard(intensity)
    rows = []
    for level, label, range_text, description in HAZARD_SCALE:
        color = HAZARD_ASSESSMENTS[level].color
        rows.append({
            "level": level.value,
            "label": label,
            "range": range_text,
            "color": color,
            "css_color": css_color(color),
            "description": description,
            "current": level is current,
        })
    return rows
