"""
City Pulse models - the aggregate status shown at the top of every view.
"""

from pydantic import BaseModel, Field
from typing import Dict
from enum import Enum


class CityStatusLevel(str, Enum):
    """City-wide classification, from quietest to busiest."""
    CALM = "calm"
    MODERATE = "moderate"
    ALERT = "alert"


class CityStatus(BaseModel):
    """
    Derived city summary. Recomputed from the alert collection on every
    request and never stored.
    """
    status: CityStatusLevel = Field(..., description="calm, moderate or alert")
    active_alert_count: int = Field(..., ge=0, description="Alerts not yet at HIGH confidence")
    resolved_count: int = Field(..., ge=0, description="Resolved today (external bookkeeping)")
    monitoring_count: int = Field(..., ge=0, description="All alerts currently tracked")
    high_priority_count: int = Field(..., ge=0, description="Alerts flagged high priority")
    message: str = Field(..., description="Fixed summary line for the status tier")
    confidence_breakdown: Dict[str, int] = Field(
        default_factory=dict,
        description="Count of alerts by confidence level (low/medium/high)"
    )
    category_breakdown: Dict[str, int] = Field(
        default_factory=dict,
        description="Count of alerts by category (traffic/power/water)"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "status": "calm",
                "active_alert_count": 3,
                "resolved_count": 18,
                "monitoring_count": 5,
                "high_priority_count": 1,
                "message": "Ranchi is mostly calm. Minor issues being monitored.",
                "confidence_breakdown": {"low": 1, "medium": 3, "high": 1},
                "category_breakdown": {"traffic": 2, "power": 2, "water": 1},
            }
        }
