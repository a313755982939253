"""Stateless hazard engine endpoints.

``POST /hazard/assess`` and ``POST /cities/classify`` expose the classifiers
directly; ``GET /hazard/scale`` returns the four-level reference scale. None
of them touch the record store.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from rainfall_monitor.domain.city import classify_city, status_color
from rainfall_monitor.domain.hazard import assess_hazard, hazard_scale, risk_percentage

router = APIRouter()


class AssessRequest(BaseModel):
    # Rainfall intensity [mm/hr]
    intensity: float = Field(..., examples=[12.5])
    # Total rainfall [mm]; informational only
    rainfall: float = Field(0.0, examples=[50.0])


class AssessmentResponse(BaseModel):
    level: str
    color: str
    css_color: str
    description: str
    recommendations: List[str]
    risk_percentage: float


class CityClassifyRequest(BaseModel):
    rainfall: float = Field(..., ge=0, examples=[60.0])


class CityClassifyResponse(BaseModel):
    rainfall: float
    status: str
    color: str


@router.post("/hazard/assess", response_model=AssessmentResponse)
def assess(req: AssessRequest):
    """Classify an intensity and return the matching assessment record."""
    assessment = assess_hazard(req.intensity, req.rainfall)
    return AssessmentResponse(
        level=assessment.level.value,
        color=assessment.color,
        css_color=assessment.css_color,
        description=assessment.description,
        recommendations=list(assessment.recommendations),
        risk_percentage=round(risk_percentage(req.intensity), 2),
    )


@router.get("/hazard/scale")
def scale(intensity: Optional[float] = None):
    return hazard_scale(intensity if intensity is not None else 0.0)


@router.post("/cities/classify", response_model=CityClassifyResponse)
def classify(req: CityClassifyRequest):
    status = classify_city(req.rainfall)
    return CityClassifyResponse(rainfall=req.rainfall, status=status.value, color=status_color(status))
