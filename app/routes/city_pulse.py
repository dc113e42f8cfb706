"""
City Pulse endpoint - aggregate city situation summary.

DESIGN PRINCIPLES (CRITICAL):
- City Pulse is a SNAPSHOT, recomputed on every request
- City Pulse does NOT trigger actions
- City Pulse does NOT modify alerts
"""

from fastapi import APIRouter, HTTPException, status
from app.models.city_pulse import CityStatus
from app.services.city_pulse_service import get_city_pulse_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/city-pulse", tags=["City Pulse"])


@router.get("", response_model=CityStatus)
async def get_city_pulse():
    """
    Get the current City Pulse.

    **Status rules (first match wins):**
    - `alert`: more than 2 high-priority alerts
    - `moderate`: more than 5 alerts in total
    - `calm`: otherwise

    **Counters:**
    - `active_alert_count`: alerts not yet at high confidence
    - `monitoring_count`: all alerts
    - `resolved_count`: supplied by outside bookkeeping
    """
    try:
        return get_city_pulse_service().get_city_pulse()
    except Exception as e:
        logger.error(f"❌ Failed to generate City Pulse: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate City Pulse: {str(e)}"
        )
