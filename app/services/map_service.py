"""
Map service - turn alerts into map pins for the frontend.

Coordinates are assigned by the geocoding collaborator at ingestion.
Alerts without them are left off the map; that is not an error.
"""

from typing import List, Optional, Sequence
from app.models.alert import Alert, AlertCategory
from app.models.projections import MapMarker
from app.services.alert_store import AlertStore, get_alert_store


def marker_id(alert: Alert) -> str:
    return f"marker-{alert.id}"


def build_map_markers(
    alerts: Sequence[Alert],
    category: Optional[AlertCategory] = None,
) -> List[MapMarker]:
    """
    Build one marker per alert that has coordinates, keeping feed order.

    Pure function.

    Args:
        alerts: Alert snapshot
        category: Only include this category (optional)
    """
    markers: List[MapMarker] = []
    for alert in alerts:
        if not alert.has_coordinates:
            continue
        if category is not None and alert.category != category:
            continue
        markers.append(MapMarker(
            id=marker_id(alert),
            category=alert.category,
            lat=alert.latitude,
            lng=alert.longitude,
            alert=alert,
        ))
    return markers


def get_map_markers(
    category: Optional[AlertCategory] = None,
    store: Optional[AlertStore] = None,
) -> List[MapMarker]:
    """Markers for the current store snapshot."""
    if store is None:
        store = get_alert_store()
    return build_map_markers(store.all(), category=category)
