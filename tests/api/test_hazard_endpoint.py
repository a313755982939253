import pytest
from fastapi.testclient import TestClient

from rainfall_monitor.app import create_app


@pytest.fixture(scope="module")
def client():
    # Stateless routes; no record store override needed
    with TestClient(create_app()) as c:
        yield c


def test_assess_endpoint(client):
    resp = client.post("/api/v1/hazard/assess", json={"intensity": 5, "rainfall": 20})
    assert resp.status_code == 200
    body = resp.json()
    assert body["level"] == "medium"
    assert body["color"] == "chart-4"
    assert body["recommendations"] == [
        "Monitor drainage systems",
        "Prepare emergency equipment",
        "Stay informed of weather updates",
        "Avoid low-lying areas if possible",
    ]
    assert body["risk_percentage"] == 10.0


def test_assess_without_rainfall(client):
    body = client.post("/api/v1/hazard/assess", json={"intensity": 50}).json()
    assert body["level"] == "critical"


def test_scale_endpoint(client):
    rows = client.get("/api/v1/hazard/scale", params={"intensity": 3}).json()
    assert [r["label"] for r in rows] == ["Low", "Medium", "High", "Critical"]
    assert [r["current"] for r in rows] == [False, True, False, False]


def test_city_classify_endpoint(client):
    body = client.post("/api/v1/cities/classify", json={"rainfall": 50}).json()
    assert body == {"rainfall": 50.0, "status": "danger", "color": "chart-3"}


def test_city_classify_rejects_negative(client):
    resp = client.post("/api/v1/cities/classify", json={"rainfall": -1})
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["loc"] == ["body", "rainfall"]


def test_assess_missing_intensity_is_422(client):
    resp = client.post("/api/v1/hazard/assess", json={"rainfall": 20})
    assert resp.status_code == 422


def test_scale_bad_query_is_422(client):
    resp = client.get("/api/v1/hazard/scale", params={"intensity": "heavy"})
    assert resp.status_code == 422


def test_assess_invalid_json_is_400(client):
    resp = client.post("/api/v1/hazard/assess", content=b"{not json",
                       headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid JSON in request body"}
