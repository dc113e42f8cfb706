"""
Demo ingestion - the dashboard's sample alerts.

Stands in for the ingestion pipeline so the demo always has something to
display. Confidence is not part of the seed; it is derived from the
supporter counts below.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from app.models.alert import Alert, AlertCategory, AlertPriority
from app.services.alert_store import AlertStore, get_alert_store
import logging

logger = logging.getLogger(__name__)


def demo_alerts(now: Optional[datetime] = None) -> List[Alert]:
    """
    Sample alerts in feed order.

    alert-005 has no coordinates, so it shows in the feed but not on the map.
    """
    now = now or datetime.now(timezone.utc)
    return [
        Alert(
            id="alert-001",
            category=AlertCategory.TRAFFIC,
            title="Heavy Traffic Congestion",
            location="Circular Road, Lalpur",
            description=(
                "Major traffic jam near the bus stand. Multiple vehicles stuck for over "
                "30 minutes. Alternative routes recommended."
            ),
            supporter_count=47,
            view_count=234,
            priority=AlertPriority.HIGH,
            created_at=now - timedelta(hours=2),
            latitude=23.3629,
            longitude=85.3346,
            image_url="https://images.unsplash.com/photo-1681026552203-d2ef6b401df4?w=800",
        ),
        Alert(
            id="alert-002",
            category=AlertCategory.POWER,
            title="Power Outage",
            location="Hindpiri, Sector 3",
            description=(
                "Complete power outage affecting residential area. No electricity for the "
                "past 4 hours. Local transformer issue suspected."
            ),
            supporter_count=23,
            view_count=156,
            created_at=now - timedelta(hours=4),
            latitude=23.3702,
            longitude=85.3290,
            image_url="https://images.unsplash.com/photo-1707590220311-ef90eb2408a7?w=800",
        ),
        Alert(
            id="alert-003",
            category=AlertCategory.WATER,
            title="Water Supply Disruption",
            location="Kanke Road",
            description=(
                "No water supply since morning. Pipe burst reported near the main junction. "
                "Repair work underway."
            ),
            supporter_count=8,
            view_count=45,
            created_at=now - timedelta(minutes=30),
            latitude=23.4030,
            longitude=85.3180,
            image_url="https://images.unsplash.com/photo-1758826898770-c76ce24b4eff?w=800",
        ),
        Alert(
            id="alert-004",
            category=AlertCategory.POWER,
            title="Streetlight Not Working",
            location="Main Road, Doranda",
            description="Multiple streetlights are not working, causing safety concerns at night.",
            supporter_count=15,
            view_count=89,
            created_at=now - timedelta(days=1),
            latitude=23.3380,
            longitude=85.3150,
        ),
        Alert(
            id="alert-005",
            category=AlertCategory.TRAFFIC,
            title="Road Construction Delay",
            location="Harmu Bypass",
            description="Road construction causing major delays. No clear timeline for completion.",
            supporter_count=34,
            view_count=178,
            priority=AlertPriority.NORMAL,
            created_at=now - timedelta(hours=3),
        ),
    ]


def seed_demo_alerts(store: Optional[AlertStore] = None) -> int:
    """
    Ingest the demo alerts if the store is empty.

    Returns:
        Number of alerts added (0 when the store already had data)
    """
    if store is None:
        store = get_alert_store()

    if len(store) > 0:
        logger.info(f"[STARTUP] Store already holds {len(store)} alert(s), skipping demo seed")
        return 0

    alerts = demo_alerts()
    for alert in alerts:
        store.add(alert, append=True)

    logger.info(f"[STARTUP] Seeded {len(alerts)} demo alert(s)")
    return len(alerts)
