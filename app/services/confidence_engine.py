"""
Confidence Engine - Deterministic confidence progression from resident support.

DESIGN PRINCIPLES (CRITICAL):
- Confidence is rule-based, NOT ML-based
- Confidence depends on supporter_count and nothing else
- Confidence only ever goes up (supports are never retracted)
- Confidence is explainable in plain language

CONFIDENCE RULES:
1. LOW: fewer than 15 supporters
2. MEDIUM: 15 to 39 supporters
3. HIGH: 40 or more supporters

Once an alert is HIGH, callers stop offering further support. That gate
lives with the caller (see can_accept_support); apply_support itself is
total and has no side effects.
"""

from app.models.alert import (
    Alert,
    ConfidenceLevel,
    HIGH_CONFIDENCE_THRESHOLD,
    MEDIUM_CONFIDENCE_THRESHOLD,
)
import logging

logger = logging.getLogger(__name__)


# Fill of the confidence meter shown on alert cards
CONFIDENCE_PROGRESS = {
    ConfidenceLevel.LOW: 15,
    ConfidenceLevel.MEDIUM: 50,
    ConfidenceLevel.HIGH: 100,
}


def confidence_for_supporters(supporter_count: int) -> ConfidenceLevel:
    """
    Threshold-table lookup of the confidence level.

    Pure function.
    """
    return ConfidenceLevel.from_supporters(supporter_count)


def apply_support(alert: Alert) -> Alert:
    """
    Record one more supporter on an alert.

    Pure function: returns a new Alert with supporter_count + 1. The
    confidence of the result is re-derived from the new count.

    Calling it twice adds two supporters; the computation itself is
    deterministic.

    Args:
        alert: Current alert value

    Returns:
        The replacement alert
    """
    return alert.model_copy(update={"supporter_count": alert.supporter_count + 1})


def can_accept_support(alert: Alert) -> bool:
    """Support is offered only until an alert reaches HIGH confidence."""
    return alert.confidence != ConfidenceLevel.HIGH


def supporters_to_next_level(alert: Alert) -> int:
    """
    Supporters still needed to reach the next confidence level.

    Returns 0 for HIGH alerts.
    """
    if alert.supporter_count >= HIGH_CONFIDENCE_THRESHOLD:
        return 0
    if alert.supporter_count >= MEDIUM_CONFIDENCE_THRESHOLD:
        return HIGH_CONFIDENCE_THRESHOLD - alert.supporter_count
    return MEDIUM_CONFIDENCE_THRESHOLD - alert.supporter_count


def confidence_progress(alert: Alert) -> int:
    """Percentage fill of the confidence meter for the alert's level."""
    return CONFIDENCE_PROGRESS[alert.confidence]


def explain_confidence(alert: Alert) -> str:
    """
    Plain-language reason for the alert's confidence level.

    Display-only; a pure function of the level and supporter count.
    """
    count = alert.supporter_count
    if alert.confidence == ConfidenceLevel.HIGH:
        return f"Verified by {count} residents"
    if alert.confidence == ConfidenceLevel.MEDIUM:
        return f"{count} residents confirmed this issue"
    if count == 0:
        return "Single report, awaiting corroboration"
    return f"{count} supporter(s) so far, awaiting corroboration"


def log_transition(before: Alert, after: Alert) -> None:
    """Log a support event, calling out confidence level changes."""
    if after.confidence != before.confidence:
        logger.info(
            f"✅ Alert {after.id} upgraded {before.confidence.value.upper()} → "
            f"{after.confidence.value.upper()} ({after.supporter_count} supporters)"
        )
    else:
        logger.info(f"Alert {after.id} supported ({after.supporter_count} supporters)")
