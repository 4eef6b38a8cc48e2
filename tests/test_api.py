import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.schemas import AlertTier
from app.services import history, river_data, snapshot
from app.services.normalizer import normalize
from app.services.sample_data import get_sample_data


@pytest.fixture
def client(monkeypatch):
    async def fake_fetch(client=None):
        return get_sample_data()

    monkeypatch.setattr(river_data, "fetch_river_data", fake_fetch)
    snapshot.cache.clear()
    yield TestClient(app)
    snapshot.cache.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_stations(client):
    response = client.get("/stations")
    assert response.status_code == 200
    assert len(response.json()) == 8


def test_list_critical_stations(client):
    response = client.get("/stations", params={"view": "critical"})
    assert all(s["is_critical"] for s in response.json())
    assert len(response.json()) == 4


def test_invalid_view_rejected(client):
    assert client.get("/stations", params={"view": "everything"}).status_code == 422


def test_get_station(client):
    response = client.get("/stations/Peradeniya")
    assert response.status_code == 200
    body = response.json()
    assert body["alert"] == AlertTier.MAJOR_FLOOD.value
    assert body["coordinates"] == {"lat": 7.26417, "lng": 80.59362}


def test_get_unknown_station(client):
    assert client.get("/stations/Atlantis").status_code == 404


def test_alerts_sorted_by_severity(client):
    alerts = client.get("/alerts").json()
    tiers = [a["alert"] for a in alerts]
    assert tiers == [AlertTier.MAJOR_FLOOD.value] * 5 + [AlertTier.MINOR_FLOOD.value] * 3


def test_alert_summary(client):
    summary = {s["alert"]: s["count"] for s in client.get("/alerts/summary").json()}
    assert summary == {AlertTier.MAJOR_FLOOD.value: 5, AlertTier.MINOR_FLOOD.value: 3}


def test_risk_report(client):
    body = client.get("/risk").json()
    assert body["score"] == 45
    assert body["band"] == "MODERATE"
    assert body["station_count"] == 8
    assert body["critical_count"] == 4


def test_refresh_replaces_snapshot(client, monkeypatch):
    client.get("/stations")

    async def quiet_fetch(client=None):
        return [{"station": "Hanwella", "level": 1.0}]

    monkeypatch.setattr(river_data, "fetch_river_data", quiet_fetch)
    assert len(client.get("/stations").json()) == 8

    response = client.post("/refresh")
    assert response.status_code == 200
    assert len(response.json()) == 1
    assert client.get("/risk").json()["score"] == 0


def test_history(client, monkeypatch):
    async def fake_history(station_name, hours=24, client=None):
        return normalize([{"station": station_name, "level": 2.0}])

    monkeypatch.setattr(history, "fetch_historical_data", fake_history)
    response = client.get("/history/Hanwella", params={"hours": 6})
    assert response.status_code == 200
    assert response.json()[0]["station"] == "Hanwella"


def test_history_not_found(client, monkeypatch):
    async def no_history(station_name, hours=24, client=None):
        return []

    monkeypatch.setattr(history, "fetch_historical_data", no_history)
    assert client.get("/history/Atlantis").status_code == 404
