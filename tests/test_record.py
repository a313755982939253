import math
import pytest

from rainfall_monitor.domain.city import CityStatus
from rainfall_monitor.domain.hazard import HazardLevel
from rainfall_monitor.domain.record import RainfallRecord, coerce_number, derive_intensity


def test_derive_intensity():
    assert derive_intensity(30.0, 3.0) == pytest.approx(10.0)
    assert derive_intensity(30.0, 0.0) == 0.0
    assert derive_intensity(30.0, -1.0) == 0.0


@pytest.mark.parametrize("raw, expected", [
    (12, 12.0),
    ("7.5", 7.5),
    ({"amount": 42, "unit": "mm"}, 42.0),
    ({"unit": "mm"}, 0.0),
    (None, 0.0),
    ("abc", 0.0),
    (math.nan, 0.0),
    (True, 0.0),
    (10 ** 400, 0.0),
    ({"amount": 10 ** 400}, 0.0),
])
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_record_from_plain_data():
    record = RainfallRecord.from_data({
        "rainfall": 60,
        "duration": 4,
        "intensity": 15,
        "region": "Northern District",
        "cities": [{"name": "Mumbai", "rainfall": 120, "population": 1000, "status": "critical"}],
        "windSpeed": 30,
        "humidity": 90,
        "temperature": 24,
    })
    assert record.hazard_level is HazardLevel.HIGH
    assert record.wind_speed == 30.0
    assert record.cities[0].status is CityStatus.CRITICAL
    data = record.to_data()
    assert data["windSpeed"] == 30.0
    assert data["cities"][0]["status"] == "critical"
    assert set(data) == {"rainfall", "duration", "intensity", "region", "cities",
                         "windSpeed", "humidity", "temperature"}


def test_record_from_nested_rainfall_object():
    record = RainfallRecord.from_data({
        "rainfall": {"amount": 80, "unit": "mm", "intensity": 55, "duration": 2},
        "location": {"region": "Coastal"},
    })
    assert record.rainfall == 80.0
    assert record.intensity == 55.0
    assert record.duration == 2.0
    assert record.region == "Coastal"
    assert record.assessment().level is HazardLevel.CRITICAL


def test_missing_intensity_is_derived():
    record = RainfallRecord.from_data({"rainfall": 30, "duration": 6})
    assert record.intensity == pytest.approx(5.0)


def test_empty_record_defaults():
    record = RainfallRecord.from_data({})
    assert record.rainfall == 0.0
    assert record.cities == []
    assert record.region == ""
    assert record.hazard_level is HazardLevel.LOW


def test_city_status_without_stored_value_is_classified():
    record = RainfallRecord.from_data({"cities": [{"name": "A", "rainfall": 30, "population": 5}]})
    assert record.cities[0].status is CityStatus.WARNING


def test_sorted_cities_and_population():
    record = RainfallRecord.from_data({"cities": [
        {"name": "A", "rainfall": 10, "population": 100},
        {"name": "B", "rainfall": 150, "population": 200},
        {"name": "C", "rainfall": 60, "population": 300},
    ]})
    assert [c.name for c in record.sorted_cities()] == ["B", "C", "A"]
    assert record.total_population == 600


def test_record_with_unrepresentable_numbers_falls_back_to_zero():
    record = RainfallRecord.from_data({"rainfall": 10 ** 400, "duration": 2, "intensity": 10 ** 400})
    assert record.rainfall == 0.0
    assert record.intensity == 0.0
    assert record.hazard_level is HazardLevel.LOW
