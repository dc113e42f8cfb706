"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from fastapi import APIRouter
from app.core.settings import settings
from app.services.alert_store import get_alert_store
from datetime import datetime, timezone


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "alerts_tracked": len(get_alert_store()),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
