"""
City Pulse Service - Aggregates the alert collection into a city status.

DESIGN PRINCIPLES (CRITICAL):
- City Pulse is a SNAPSHOT, recomputed on every read
- City Pulse owns no state and keeps no counters
- City Pulse does NOT modify alerts

STATUS RULES (first match wins):
1. More than 2 high-priority alerts → ALERT
2. More than 5 alerts in total → MODERATE
3. Otherwise → CALM

The resolved count cannot be derived from the alert store. It is
supplied by outside bookkeeping (configuration) and passed through.
"""

from app.core.settings import settings
from app.models.alert import Alert, AlertCategory, AlertPriority, ConfidenceLevel
from app.models.city_pulse import CityStatus, CityStatusLevel
from app.services.alert_store import AlertStore, get_alert_store
from typing import Dict, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


# Status thresholds
ALERT_HIGH_PRIORITY_THRESHOLD = 2   # more than this many high-priority alerts
MODERATE_VOLUME_THRESHOLD = 5       # more than this many alerts overall

STATUS_MESSAGES = {
    CityStatusLevel.ALERT: "{city} has multiple active disruptions. High-priority reports are being tracked.",
    CityStatusLevel.MODERATE: "{city} is experiencing moderate activity. Some areas affected.",
    CityStatusLevel.CALM: "{city} is mostly calm. Minor issues being monitored.",
}


def classify_city_status(high_priority_count: int, alert_count: int) -> CityStatusLevel:
    """
    Pick the status tier.

    Pure function.
    """
    if high_priority_count > ALERT_HIGH_PRIORITY_THRESHOLD:
        return CityStatusLevel.ALERT
    if alert_count > MODERATE_VOLUME_THRESHOLD:
        return CityStatusLevel.MODERATE
    return CityStatusLevel.CALM


def status_message(status: CityStatusLevel, city_name: str) -> str:
    """Fixed summary line for a status tier."""
    return STATUS_MESSAGES[status].format(city=city_name)


def _count_by_confidence(alerts: Sequence[Alert]) -> Dict[str, int]:
    counts = {level.value: 0 for level in ConfidenceLevel}
    for alert in alerts:
        counts[alert.confidence.value] += 1
    return counts


def _count_by_category(alerts: Sequence[Alert]) -> Dict[str, int]:
    counts = {category.value: 0 for category in AlertCategory}
    for alert in alerts:
        counts[alert.category.value] += 1
    return counts


def compute_city_status(
    alerts: Sequence[Alert],
    resolved_count: int = 0,
    city_name: Optional[str] = None,
) -> CityStatus:
    """
    Aggregate an alert collection into a CityStatus.

    Pure function: the same alerts always give the same status.

    Args:
        alerts: Every alert currently tracked
        resolved_count: Resolved-today figure from outside bookkeeping
        city_name: Name used in the message (defaults to settings.CITY_NAME)

    Returns:
        CityStatus summary
    """
    city = city_name or settings.CITY_NAME

    active_alert_count = sum(1 for a in alerts if a.confidence != ConfidenceLevel.HIGH)
    high_priority_count = sum(1 for a in alerts if a.priority == AlertPriority.HIGH)
    status = classify_city_status(high_priority_count, len(alerts))

    return CityStatus(
        status=status,
        active_alert_count=active_alert_count,
        resolved_count=resolved_count,
        monitoring_count=len(alerts),
        high_priority_count=high_priority_count,
        message=status_message(status, city),
        confidence_breakdown=_count_by_confidence(alerts),
        category_breakdown=_count_by_category(alerts),
    )


class CityPulseService:
    """
    Computes the City Pulse from a fresh store snapshot on each call.

    This is a READ-ONLY service.
    """

    def __init__(
        self,
        store: Optional[AlertStore] = None,
        resolved_count: Optional[int] = None,
        city_name: Optional[str] = None,
    ):
        self._store = store
        self.resolved_count = settings.RESOLVED_TODAY_COUNT if resolved_count is None else resolved_count
        self.city_name = city_name or settings.CITY_NAME

    @property
    def store(self) -> AlertStore:
        return self._store if self._store is not None else get_alert_store()

    def get_city_pulse(self) -> CityStatus:
        """
        Generate the City Pulse for the configured city.

        Returns:
            CityStatus: Structured summary of the city situation
        """
        alerts = self.store.all()
        pulse = compute_city_status(alerts, self.resolved_count, self.city_name)
        logger.info(
            f"City Pulse for {self.city_name}: {pulse.status.value} "
            f"({pulse.monitoring_count} monitored, {pulse.high_priority_count} high priority)"
        )
        return pulse


# Global service instance (singleton pattern)
_city_pulse_service: Optional[CityPulseService] = None


def get_city_pulse_service() -> CityPulseService:
    """
    Get or create CityPulseService singleton instance.

    Returns:
        CityPulseService: The global city pulse service instance
    """
    global _city_pulse_service
    if _city_pulse_service is None:
        _city_pulse_service = CityPulseService()
    return _city_pulse_service
