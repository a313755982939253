"""Per-city rainfall status classification and severity ordering."""
from __future__ import annotations

from typing import Iterable, List, TypeVar

from .hazard import SeverityEnum, css_color, is_finite

__all__ = [
    "CityStatus",
    "STATUS_SORT_ORDER",
    "classify_city",
    "status_color",
    "sort_by_severity",
]

CRITICAL_RAINFALL_MM = 100.0
DANGER_RAINFALL_MM = 50.0
WARNING_RAINFALL_MM = 25.0


class CityStatus(SeverityEnum):
    """Per-city severity, ordered safe < warning < danger < critical."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        return 3 - STATUS_SORT_ORDER[self]

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]


# Sort key for city lists: most severe first.
STATUS_SORT_ORDER = {
    CityStatus.CRITICAL: 0,
    CityStatus.DANGER: 1,
    CityStatus.WARNING: 2,
    CityStatus.SAFE: 3,
}

_STATUS_COLORS = {
    CityStatus.SAFE: "chart-2",
    CityStatus.WARNING: "chart-4",
    CityStatus.DANGER: "chart-3",
    CityStatus.CRITICAL: "destructive",
}


def classify_city(rainfall: float) -> CityStatus:
    """Classify a city's rainfall amount (mm). Non-finite input is ``safe``."""
    if not is_finite(rainfall):
        return CityStatus.SAFE
    if rainfall >= CRITICAL_RAINFALL_MM:
        return CityStatus.CRITICAL
    if rainfall >= DANGER_RAINFALL_MM:
        return CityStatus.DANGER
    if rainfall >= WARNING_RAINFALL_MM:
        return CityStatus.WARNING
    return CityStatus.SAFE


def status_color(status: CityStatus, css: bool = False) -> str:
    token = CityStatus(status).color
    return css_color(token) if css else token


T = TypeVar("T")


def sort_by_severity(items: Iterable[T], key=lambda item: item.status) -> List[T]:
    """Return a new list sorted critical first; ties keep their input order."""
    return sorted(items, key=lambda item: STATUS_SORT_ORDER[CityStatus(key(item))])
