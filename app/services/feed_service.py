"""
Feed Service - public alert feed and operator console views.

Both views are built from a store snapshot and never touch the store.
"""

from typing import List, Optional, Sequence, Tuple
from app.models.alert import Alert
from app.models.projections import FeedItem
from app.services.alert_store import AlertStore, get_alert_store
from app.services.confidence_engine import (
    can_accept_support,
    confidence_progress,
    explain_confidence,
)


def build_feed_item(alert: Alert) -> FeedItem:
    return FeedItem(
        alert=alert,
        can_support=can_accept_support(alert),
        confidence_progress=confidence_progress(alert),
        confidence_reason=explain_confidence(alert),
    )


def build_feed(alerts: Sequence[Alert]) -> List[FeedItem]:
    """
    Public feed: every alert in store order (newest ingested first).

    Pure function. Nothing is filtered out.
    """
    return [build_feed_item(alert) for alert in alerts]


def build_operator_view(alerts: Sequence[Alert]) -> Tuple[Alert, ...]:
    """
    Operator console: the raw alert collection, unfiltered, including
    low-confidence and non-prioritised alerts.

    Pure function.
    """
    return tuple(alerts)


def get_feed(store: Optional[AlertStore] = None) -> List[FeedItem]:
    if store is None:
        store = get_alert_store()
    return build_feed(store.all())


def get_operator_view(store: Optional[AlertStore] = None) -> Tuple[Alert, ...]:
    if store is None:
        store = get_alert_store()
    return build_operator_view(store.all())
