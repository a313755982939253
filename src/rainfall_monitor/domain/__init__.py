"""Hazard engine and record model (pure, no I/O)."""

from .hazard import (
    HazardLevel,
    HazardAssessment,
    HAZARD_ASSESSMENTS,
    classify_hazard,
    assess_hazard,
    hazard_scale,
    risk_percentage,
)
from .city import CityStatus, STATUS_SORT_ORDER, classify_city, sort_by_severity
from .record import City, RainfallRecord, derive_intensity

__all__ = [
    "HazardLevel",
    "HazardAssessment",
    "HAZARD_ASSESSMENTS",
    "classify_hazard",
    "assess_hazard",
    "hazard_scale",
    "risk_percentage",
    "CityStatus",
    "STATUS_SORT_ORDER",
    "classify_city",
    "sort_by_severity",
    "City",
    "RainfallRecord",
    "derive_intensity",
]
