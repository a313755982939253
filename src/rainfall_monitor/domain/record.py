"""Shared rainfall record and city models.

The record is the single document written by the controller and read by the
viewers. Values coming from storage or older clients may be plain numbers,
numeric strings or ``{amount, unit, ...}`` objects; they are coerced to
floats here, once, so the hazard engine only ever sees numbers.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .city import CityStatus, classify_city, sort_by_severity
from .hazard import HazardAssessment, HazardLevel, assess_hazard, classify_hazard

# (field name, wire key)
NUMERIC_FIELDS = (
    ("rainfall", "rainfall"),
    ("duration", "duration"),
    ("intensity", "intensity"),
    ("wind_speed", "windSpeed"),
    ("humidity", "humidity"),
    ("temperature", "temperature"),
)


def coerce_number(value: Any) -> float:
    """Coerce a loosely-typed numeric value to a finite float (fallback 0.0)."""
    if isinstance(value, dict):
        value = value.get("amount")
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def derive_intensity(rainfall: float, duration: float) -> float:
    """Average intensity in mm/hr; 0.0 when the duration is not positive."""
    if duration > 0:
        return rainfall / duration
    return 0.0


class City(BaseModel):
    """A monitored city.

    ``status`` is a snapshot: when omitted it is classified from ``rainfall``
    at construction, when supplied (e.g. read back from storage) it is kept
    as-is and never recomputed.
    """
    name: str = Field(..., min_length=1)
    rainfall: float = Field(..., ge=0)
    population: int = Field(..., gt=0)
    status: Optional[CityStatus] = None

    @model_validator(mode="after")
    def _snapshot_status(self) -> "City":
        if self.status is None:
            self.status = classify_city(self.rainfall)
        return self


class RainfallRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rainfall: float = 0.0
    duration: float = Field(0.0, ge=0)
    intensity: float = 0.0
    region: str = ""
    cities: List[City] = Field(default_factory=list)
    wind_speed: float = Field(0.0, alias="windSpeed")
    humidity: float = 0.0
    temperature: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _normalise(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        # Older writers nest intensity/duration inside the rainfall object
        nested = data.get("rainfall")
        if isinstance(nested, dict):
            for key in ("intensity", "duration"):
                if data.get(key) is None and nested.get(key) is not None:
                    data[key] = nested[key]

        intensity_missing = data.get("intensity") is None
        for name, alias in NUMERIC_FIELDS:
            raw = data.pop(name, None) if name != alias else None
            data[alias] = coerce_number(data.get(alias, raw))
        if intensity_missing:
            data["intensity"] = derive_intensity(data["rainfall"], data["duration"])
        if data["duration"] < 0:
            data["duration"] = 0.0

        if not data.get("region"):
            location = data.get("location")
            region = location.get("region") if isinstance(location, dict) else None
            data["region"] = region or ""
        if data.get("cities") is None:
            data["cities"] = []
        return data

    @classmethod
    def from_data(cls, data: Dict) -> "RainfallRecord":
        return cls.model_validate(data)

    def to_data(self) -> Dict:
        """Wire representation (camelCase keys) stored under ``data``."""
        return self.model_dump(by_alias=True, mode="json")

    @property
    def hazard_level(self) -> HazardLevel:
        return classify_hazard(self.intensity)

    def assessment(self) -> HazardAssessment:
        return assess_hazard(self.intensity, self.rainfall)

    def sorted_cities(self) -> List[City]:
        return sort_by_severity(self.cities)

    def cities_with_status(self, *statuses: CityStatus) -> List[City]:
        return [c for c in self.cities if c.status in statuses]

    @property
    def total_population(self) -> int:
        return sum(c.population for c in self.cities)
