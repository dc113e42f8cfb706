"""
Pydantic models for community alerts.

An Alert is immutable: every change produces a new record that replaces
the old one in the store. Confidence is never stored, it is re-derived
from supporter_count each time it is read.
"""

from pydantic import BaseModel, Field, computed_field
from datetime import datetime, timezone
from typing import Optional
from enum import Enum


# Supporter thresholds for confidence levels
MEDIUM_CONFIDENCE_THRESHOLD = 15
HIGH_CONFIDENCE_THRESHOLD = 40


class AlertCategory(str, Enum):
    """Kind of disruption. Fixed when the alert is created."""
    TRAFFIC = "traffic"
    POWER = "power"
    WATER = "water"


class AlertPriority(str, Enum):
    """Priority flag assigned upstream at creation."""
    NORMAL = "normal"
    HIGH = "high"


class ConfidenceLevel(str, Enum):
    """
    Crowd-derived confidence, ordered LOW < MEDIUM < HIGH.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, ConfidenceLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ConfidenceLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ConfidenceLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ConfidenceLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_supporters(cls, supporter_count: int) -> "ConfidenceLevel":
        """
        Look up the confidence level for a supporter count.

        | supporters | level  |
        |------------|--------|
        | < 15       | low    |
        | 15 - 39    | medium |
        | >= 40      | high   |
        """
        if supporter_count >= HIGH_CONFIDENCE_THRESHOLD:
            return cls.HIGH
        if supporter_count >= MEDIUM_CONFIDENCE_THRESHOLD:
            return cls.MEDIUM
        return cls.LOW


_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 0,
    ConfidenceLevel.MEDIUM: 1,
    ConfidenceLevel.HIGH: 2,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Alert(BaseModel):
    """
    A single reported disruption.

    Field names are the stable contract read by the feed, map and
    operator console. A `confidence` value passed to the constructor is
    ignored; the level always comes from supporter_count.
    """
    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    category: AlertCategory = Field(..., description="traffic, power or water")
    title: str
    location: str
    description: str
    supporter_count: int = Field(default=0, ge=0, description="Residents who supported this alert")
    view_count: int = Field(default=0, ge=0, description="Times the alert detail was viewed")
    priority: Optional[AlertPriority] = Field(None, description="Upstream priority flag")
    created_at: datetime = Field(default_factory=_utcnow, description="When the alert was created")
    # Assigned by the geocoding collaborator; alerts without both are left off the map
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    image_url: Optional[str] = None

    @computed_field
    @property
    def confidence(self) -> ConfidenceLevel:
        return ConfidenceLevel.from_supporters(self.supporter_count)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    class Config:
        frozen = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "id": "alert-002",
                "category": "power",
                "title": "Power Outage",
                "location": "Hindpiri, Sector 3",
                "description": "Complete power outage affecting residential area.",
                "supporter_count": 23,
                "view_count": 156,
                "priority": None,
                "created_at": "2026-01-15T10:30:00Z",
                "latitude": 23.3702,
                "longitude": 85.3290,
                "confidence": "medium",
            }
        }
