"""
Admin endpoints - operator console.

DESIGN PRINCIPLES (CRITICAL):
- Operators get full visibility: every alert, including low-confidence
  and non-prioritised ones
- This view is read-only; operators do NOT edit, delete or downgrade alerts
"""

from typing import List, Optional
from fastapi import APIRouter, Query
from app.models.alert import Alert, ConfidenceLevel
from app.services.feed_service import get_operator_view
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/alerts", response_model=List[Alert])
async def list_all_alerts(
    min_confidence: Optional[ConfidenceLevel] = Query(
        None,
        description="Hide alerts below this confidence level (default: show everything)"
    )
):
    """
    Get the raw alert collection for the operator console.
    """
    alerts = get_operator_view()
    if min_confidence is not None:
        alerts = tuple(a for a in alerts if a.confidence >= min_confidence)
    logger.info(f"Operator console: {len(alerts)} alert(s)")
    return list(alerts)
