from rainfall_monitor.domain import facets
from rainfall_monitor.domain.record import RainfallRecord


def _record(**overrides):
    data = {
        "rainfall": 40,
        "duration": 4,
        "intensity": 10,
        "region": "Northern District",
        "cities": [
            {"name": "Safe Town", "rainfall": 5, "population": 1000},
            {"name": "Flood City", "rainfall": 110, "population": 5000},
            {"name": "Wet Village", "rainfall": 55, "population": 250},
        ],
        "windSpeed": 20,
        "humidity": 85,
        "temperature": 22,
    }
    data.update(overrides)
    return RainfallRecord.from_data(data)


def test_warning_alert():
    alert = facets.warning_alert(_record())
    assert alert["level"] == "high"
    assert alert["title"] == "HIGH HAZARD LEVEL"
    assert alert["numbered_recommendations"][0] == "1. Activate emergency response teams"
    assert alert["conditions"]["region"] == "Northern District"


def test_affected_cities():
    view = facets.affected_cities(_record())
    assert [c["name"] for c in view["cities"]] == ["Flood City", "Wet Village", "Safe Town"]
    assert view["total_population"] == 6250
    assert view["critical_cities"] == 1
    assert view["danger_cities"] == 1
    assert view["cities"][0]["css_color"] == "hsl(var(--destructive))"


def test_intensity_outlook_thresholds_are_exclusive():
    assert facets.intensity_outlook(10).startswith("Moderate rainfall ongoing")
    assert facets.intensity_outlook(10.1).startswith("Heavy rainfall detected")
    assert facets.intensity_outlook(2.5).startswith("Light rainfall conditions")


def test_duration_outlook():
    assert facets.duration_outlook(8) == (
        "Prolonged rainfall event (8 hours). Soil saturation levels are high, increasing flood risk.")
    assert facets.duration_outlook(4).startswith("Moderate duration rainfall (4 hours)")
    assert facets.duration_outlook(1.5) == "Short duration event (1.5 hours). Risk levels remain manageable."


def test_region_outlook():
    assert facets.region_outlook(_record()) == (
        "Region: Northern District. 3 cities are currently being monitored. "
        "2 cities require immediate attention.")
    quiet = _record(region="", cities=[])
    assert facets.region_outlook(quiet) == "Region: N/A. 0 cities are currently being monitored."


def test_statistics_snapshot():
    stats = facets.statistics_snapshot(_record())
    assert stats["hazard_level"] == "high"
    assert stats["risk_percentage"] == 20.0
    assert stats["critical_cities"] == 1
    assert stats["weather"]["humidity_pct"] == 85.0


def test_hazard_scale_view():
    view = facets.hazard_scale_view(_record(intensity=1))
    assert view["current_level"] == "low"
    assert sum(1 for row in view["scale"] if row["current"]) == 1


def test_duration_outlook_keeps_full_precision():
    assert "(2.1234567 hours)" in facets.duration_outlook(2.1234567)
    assert "(1234567 hours)" in facets.duration_outlook(1234567)
    assert "(7 hours)" in facets.duration_outlook(7.0)
