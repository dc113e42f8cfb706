"""
Alert endpoints - public feed, alert detail, support and view events.

The support gate lives here: once an alert has reached HIGH confidence
it no longer accepts support (409). The store itself never refuses a
support event.
"""

from typing import List
from fastapi import APIRouter, HTTPException, status
from app.models.alert import Alert
from app.models.projections import FeedItem
from app.services.alert_store import AlertNotFoundError, get_alert_store
from app.services.confidence_engine import can_accept_support
from app.services.feed_service import build_feed_item, get_feed
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["Alerts"])


def _not_found(alert_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Alert {alert_id} not found"
    )


@router.get("", response_model=List[FeedItem])
async def get_alert_feed():
    """
    Get the public alert feed.

    Every alert in feed order (newest ingested first), with its
    confidence meter and whether it still accepts support.
    """
    return get_feed()


@router.get("/{alert_id}", response_model=Alert)
async def get_alert(alert_id: str):
    """Get a single alert."""
    try:
        return get_alert_store().get(alert_id)
    except AlertNotFoundError:
        raise _not_found(alert_id)


@router.post("/{alert_id}/support", response_model=FeedItem)
async def support_alert(alert_id: str):
    """
    Support an alert ("I see this too").

    Adds one supporter and may raise the alert's confidence level.

    Returns:
        The updated feed card

    Errors:
        404 if the alert does not exist
        409 if the alert is already at HIGH confidence
    """
    store = get_alert_store()
    try:
        alert = store.get(alert_id)
        if not can_accept_support(alert):
            logger.info(f"Support ignored for {alert_id}: already HIGH confidence")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Alert {alert_id} is already at high confidence"
            )
        updated = store.support_alert(alert_id)
    except AlertNotFoundError:
        raise _not_found(alert_id)

    return build_feed_item(updated)


@router.post("/{alert_id}/views", response_model=Alert)
async def record_alert_view(alert_id: str):
    """Record that a resident opened the alert detail."""
    try:
        return get_alert_store().record_view(alert_id)
    except AlertNotFoundError:
        raise _not_found(alert_id)
