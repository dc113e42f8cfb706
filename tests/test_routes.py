"""Tests for the HTTP routes using FastAPI's TestClient.

The client is used without a context manager, so the startup seed does
not run; each test installs its own store.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.alert import AlertPriority


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seeded(global_store, make_alert):
    global_store.add(make_alert("a", supporter_count=14, latitude=23.36, longitude=85.33), append=True)
    global_store.add(make_alert("b", supporter_count=40, priority=AlertPriority.HIGH), append=True)
    return global_store


class TestRoot:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client, seeded):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["alerts_tracked"] == 2


class TestAlertRoutes:

    def test_feed(self, client, seeded):
        body = client.get("/alerts").json()
        assert [item["alert"]["id"] for item in body] == ["a", "b"]
        assert body[0]["alert"]["confidence"] == "low"
        assert body[1]["can_support"] is False

    def test_get_alert(self, client, seeded):
        body = client.get("/alerts/a").json()
        assert body["supporter_count"] == 14
        assert body["category"] == "traffic"

    def test_get_unknown_alert(self, client, seeded):
        assert client.get("/alerts/nope").status_code == 404

    def test_support(self, client, seeded):
        response = client.post("/alerts/a/support")
        assert response.status_code == 200
        body = response.json()
        assert body["alert"]["supporter_count"] == 15
        assert body["alert"]["confidence"] == "medium"
        assert seeded.get("a").supporter_count == 15

    def test_support_high_alert_conflicts(self, client, seeded):
        response = client.post("/alerts/b/support")
        assert response.status_code == 409
        assert seeded.get("b").supporter_count == 40

    def test_support_unknown_alert(self, client, seeded):
        response = client.post("/alerts/nope/support")
        assert response.status_code == 404
        assert len(seeded) == 2

    def test_record_view(self, client, seeded):
        response = client.post("/alerts/a/views")
        assert response.status_code == 200
        assert response.json()["view_count"] == 1

    def test_record_view_unknown(self, client, seeded):
        assert client.post("/alerts/nope/views").status_code == 404


class TestCityPulseRoute:

    def test_city_pulse(self, client, seeded):
        body = client.get("/city-pulse").json()
        assert body["status"] == "calm"
        assert body["monitoring_count"] == 2
        assert body["active_alert_count"] == 1
        assert body["high_priority_count"] == 1

    def test_city_pulse_empty(self, client, global_store):
        body = client.get("/city-pulse").json()
        assert body["status"] == "calm"
        assert body["monitoring_count"] == 0


class TestMapRoute:

    def test_markers(self, client, seeded):
        body = client.get("/map/markers").json()
        assert len(body) == 1
        assert body[0]["id"] == "marker-a"
        assert body[0]["lat"] == 23.36
        assert body[0]["alert"]["id"] == "a"

    def test_category_filter(self, client, seeded):
        assert client.get("/map/markers", params={"category": "water"}).json() == []

    def test_invalid_category(self, client, seeded):
        assert client.get("/map/markers", params={"category": "fire"}).status_code == 422


class TestAdminRoute:

    def test_all_alerts(self, client, seeded):
        body = client.get("/admin/alerts").json()
        assert [a["id"] for a in body] == ["a", "b"]

    def test_min_confidence(self, client, seeded):
        body = client.get("/admin/alerts", params={"min_confidence": "medium"}).json()
        assert [a["id"] for a in body] == ["b"]
