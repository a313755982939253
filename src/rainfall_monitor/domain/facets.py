"""Derived dashboard facets computed from a single rainfall record.

Each function maps a `RainfallRecord` to the JSON-serialisable payload shown
by one viewer (warning alert, affected cities, statistics, hazard scale).
No I/O and no state.
"""
from __future__ import annotations

from typing import Dict, List

from .city import CityStatus, status_color
from .hazard import css_color, hazard_scale, risk_percentage
from .record import RainfallRecord

HEAVY_OUTLOOK_MMHR = 10.0
MODERATE_OUTLOOK_MMHR = 2.5
PROLONGED_EVENT_HOURS = 6.0
MODERATE_EVENT_HOURS = 3.0


def _fmt_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def warning_alert(record: RainfallRecord) -> Dict:
    """Hazard banner, current conditions and numbered recommendations."""
    assessment = record.assessment()
    return {
        "level": assessment.level.value,
        "title": f"{assessment.level.value.upper()} HAZARD LEVEL",
        "color": assessment.color,
        "css_color": assessment.css_color,
        "description": assessment.description,
        "recommendations": list(assessment.recommendations),
        "numbered_recommendations": assessment.numbered_recommendations(),
        "conditions": {
            "rainfall_mm": record.rainfall,
            "intensity_mmhr": record.intensity,
            "duration_hours": record.duration,
            "region": record.region or "N/A",
        },
    }


def affected_cities(record: RainfallRecord) -> Dict:
    """Cities sorted most severe first, with population and status totals."""
    cities: List[Dict] = []
    for city in record.sorted_cities():
        cities.append({
            "name": city.name,
            "rainfall": city.rainfall,
            "population": city.population,
            "status": city.status.value,
            "color": status_color(city.status),
            "css_color": status_color(city.status, css=True),
        })
    return {
        "region": record.region or "N/A",
        "total_cities": len(record.cities),
        "total_population": record.total_population,
        "critical_cities": len(record.cities_with_status(CityStatus.CRITICAL)),
        "danger_cities": len(record.cities_with_status(CityStatus.DANGER)),
        "cities": cities,
    }


def intensity_outlook(intensity: float) -> str:
    if intensity > HEAVY_OUTLOOK_MMHR:
        return "Heavy rainfall detected. Expect continued high intensity for the next few hours."
    if intensity > MODERATE_OUTLOOK_MMHR:
        return "Moderate rainfall ongoing. Monitor conditions closely for any changes."
    return "Light rainfall conditions. Situation is stable with low risk."


def duration_outlook(duration: float) -> str:
    hours = _fmt_number(duration)
    if duration > PROLONGED_EVENT_HOURS:
        return (f"Prolonged rainfall event ({hours} hours). Soil saturation levels "
                "are high, increasing flood risk.")
    if duration > MODERATE_EVENT_HOURS:
        return (f"Moderate duration rainfall ({hours} hours). Continue monitoring "
                "drainage systems.")
    return f"Short duration event ({hours} hours). Risk levels remain manageable."


def region_outlook(record: RainfallRecord) -> str:
    note = (f"Region: {record.region or 'N/A'}. {len(record.cities)} cities are "
            "currently being monitored.")
    attention = len(record.cities_with_status(CityStatus.CRITICAL, CityStatus.DANGER))
    if attention > 0:
        note += f" {attention} cities require immediate attention."
    return note


def statistics_snapshot(record: RainfallRecord) -> Dict:
    """Risk gauge, weather conditions and outlook notes for the statistics view."""
    level = record.hazard_level
    return {
        "hazard_level": level.value,
        "risk_percentage": round(risk_percentage(record.intensity), 2),
        "risk_color": css_color(record.assessment().color),
        "critical_cities": len(record.cities_with_status(CityStatus.CRITICAL)),
        "total_population": record.total_population,
        "weather": {
            "wind_speed_kmh": record.wind_speed,
            "humidity_pct": record.humidity,
            "temperature_c": record.temperature,
        },
        "outlook": {
            "intensity": intensity_outlook(record.intensity),
            "duration": duration_outlook(record.duration),
            "region": region_outlook(record),
        },
    }


def hazard_scale_view(record: RainfallRecord) -> Dict:
    assessment = record.assessment()
    return {
        "current_level": assessment.level.value,
        "intensity_mmhr": record.intensity,
        "rainfall_mm": record.rainfall,
        "duration_hours": record.duration,
        "description": assessment.description,
        "scale": hazard_scale(record.intensity),
    }
