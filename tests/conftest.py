"""Shared fixtures for the alert engine tests."""

import pytest
from datetime import datetime, timezone

from app.models.alert import Alert, AlertCategory, AlertPriority
from app.services import alert_store as alert_store_module
from app.services.alert_store import AlertStore


@pytest.fixture
def make_alert():
    """Factory for alerts with sensible defaults."""
    def _make(
        alert_id: str = "alert-test",
        supporter_count: int = 0,
        category: AlertCategory = AlertCategory.TRAFFIC,
        priority=None,
        latitude=None,
        longitude=None,
        view_count: int = 0,
    ) -> Alert:
        return Alert(
            id=alert_id,
            category=category,
            title="Test alert",
            location="Lalpur",
            description="Something happened",
            supporter_count=supporter_count,
            view_count=view_count,
            priority=priority,
            created_at=datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc),
            latitude=latitude,
            longitude=longitude,
        )
    return _make


@pytest.fixture
def high_priority_alerts(make_alert):
    """Three alerts flagged high priority."""
    return [
        make_alert(f"hp-{i}", priority=AlertPriority.HIGH)
        for i in range(3)
    ]


@pytest.fixture
def global_store():
    """Install a fresh global store and restore the previous one afterwards."""
    previous = alert_store_module._alert_store
    store = alert_store_module.reset_alert_store()
    yield store
    alert_store_module._alert_store = previous
