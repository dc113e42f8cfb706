"""
Alert Store - the single source of truth for alerts.

DESIGN PRINCIPLES:
- Alerts are immutable; every mutation replaces the stored record
- Only two mutations exist: support_alert and record_view
- Insertion order is kept for the feed (newest ingested first)
- Reads return snapshots, never live views
- Alerts are never deleted here (archival belongs elsewhere)

CONCURRENCY:
- A per-alert lock serialises read-modify-write on one id, so two
  concurrent supports on the same alert both land (no lost update)
- A store-wide lock guards inserts, record swaps and snapshot copies,
  so readers never see a half-applied change
- Different ids only share the store-wide lock for the swap itself
"""

from collections import OrderedDict
from typing import Callable, Dict, Iterable, Optional, Tuple
from app.models.alert import Alert
from app.services.confidence_engine import apply_support, log_transition
import threading
import logging

logger = logging.getLogger(__name__)


class AlertNotFoundError(LookupError):
    """Raised when a store operation names an unknown alert id."""

    def __init__(self, alert_id: str):
        super().__init__(f"Alert not found: {alert_id}")
        self.alert_id = alert_id


class DuplicateAlertError(ValueError):
    """Raised when ingesting an alert whose id is already stored."""

    def __init__(self, alert_id: str):
        super().__init__(f"Alert already exists: {alert_id}")
        self.alert_id = alert_id


class AlertStore:
    """
    Ordered, thread-safe mapping from alert id to Alert.
    """

    def __init__(self, alerts: Optional[Iterable[Alert]] = None):
        self._alerts: "OrderedDict[str, Alert]" = OrderedDict()
        self._lock = threading.Lock()
        self._record_locks: Dict[str, threading.Lock] = {}

        for alert in alerts or ():
            self.add(alert, append=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._alerts)

    def __contains__(self, alert_id: object) -> bool:
        with self._lock:
            return alert_id in self._alerts

    def add(self, alert: Alert, append: bool = False) -> Alert:
        """
        Ingest a new alert.

        New alerts go to the front of the feed unless append is True.

        Raises:
            DuplicateAlertError: If an alert with the same id is stored
        """
        with self._lock:
            if alert.id in self._alerts:
                raise DuplicateAlertError(alert.id)
            self._alerts[alert.id] = alert
            self._record_locks[alert.id] = threading.Lock()
            if not append:
                self._alerts.move_to_end(alert.id, last=False)

        logger.info(f"Alert {alert.id} ingested ({alert.category.value}, {alert.confidence.value})")
        return alert

    def get(self, alert_id: str) -> Alert:
        """
        Look up one alert.

        Raises:
            AlertNotFoundError: If the id is unknown
        """
        with self._lock:
            alert = self._alerts.get(alert_id)
        if alert is None:
            logger.warning(f"Alert lookup failed: {alert_id} not found")
            raise AlertNotFoundError(alert_id)
        return alert

    def all(self) -> Tuple[Alert, ...]:
        """
        Snapshot of every alert in feed order.

        The tuple holds immutable records, so later mutations of the
        store never show up in a snapshot already handed out.
        """
        with self._lock:
            return tuple(self._alerts.values())

    def support_alert(self, alert_id: str) -> Alert:
        """
        Add one supporter to an alert and store the result.

        Raises:
            AlertNotFoundError: If the id is unknown (store is unchanged)
        """
        before, after = self._replace(alert_id, apply_support)
        log_transition(before, after)
        return after

    def record_view(self, alert_id: str) -> Alert:
        """
        Count one view of an alert. Confidence is not affected.

        Raises:
            AlertNotFoundError: If the id is unknown (store is unchanged)
        """
        _, after = self._replace(
            alert_id,
            lambda alert: alert.model_copy(update={"view_count": alert.view_count + 1}),
        )
        logger.debug(f"Alert {alert_id} viewed ({after.view_count} views)")
        return after

    def _replace(self, alert_id: str, transition: Callable[[Alert], Alert]) -> Tuple[Alert, Alert]:
        """Apply a transition to one record under its lock."""
        with self._lock:
            record_lock = self._record_locks.get(alert_id)
        if record_lock is None:
            logger.warning(f"Alert update failed: {alert_id} not found")
            raise AlertNotFoundError(alert_id)

        with record_lock:
            with self._lock:
                before = self._alerts[alert_id]
            after = transition(before)
            with self._lock:
                self._alerts[alert_id] = after
        return before, after


# Global store instance (singleton pattern)
_alert_store: Optional[AlertStore] = None


def get_alert_store() -> AlertStore:
    """
    Get or create the AlertStore singleton instance.

    Returns:
        AlertStore: The global alert store
    """
    global _alert_store
    if _alert_store is None:
        _alert_store = AlertStore()
    return _alert_store


def reset_alert_store(store: Optional[AlertStore] = None) -> AlertStore:
    """Replace the global store, e.g. with a fresh one for tests."""
    global _alert_store
    _alert_store = store if store is not None else AlertStore()
    return _alert_store
