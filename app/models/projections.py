"""
Read-only shapes handed to the feed, the map and the operator console.
"""

from pydantic import BaseModel, Field

from app.models.alert import Alert, AlertCategory


class FeedItem(BaseModel):
    """One card in the public alert feed."""
    alert: Alert
    can_support: bool = Field(..., description="False once the alert has reached HIGH confidence")
    confidence_progress: int = Field(..., ge=0, le=100, description="Confidence meter fill (percent)")
    confidence_reason: str = Field(..., description="Plain-language explanation of the confidence level")

    class Config:
        frozen = True


class MapMarker(BaseModel):
    """A pin for an alert that has coordinates."""
    id: str
    category: AlertCategory
    lat: float
    lng: float
    alert: Alert = Field(..., description="The alert this pin refers to")

    class Config:
        frozen = True
