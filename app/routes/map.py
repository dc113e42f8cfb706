"""Map routes - expose alert pins for the frontend map.

Only alerts with coordinates get a pin. The response is validated
through the MapMarker model.
"""

from typing import List, Optional
from fastapi import APIRouter, Query
from app.models.alert import AlertCategory
from app.models.projections import MapMarker
from app.services.map_service import get_map_markers


router = APIRouter(prefix="/map", tags=["Map"])


@router.get("/markers", response_model=List[MapMarker])
async def map_markers(
    category: Optional[AlertCategory] = Query(None, description="Only pins of this category")
):
    """
    Get map markers for every alert that has coordinates.

    Alerts without coordinates are skipped, not reported as errors.
    """
    return get_map_markers(category=category)
