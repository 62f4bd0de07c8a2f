# app/routers/locations.py
"""Location Ledger endpoints: record a GPS sample, current positions, history."""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.models.enums import EntityType
from app.schemas.common import to_naive_utc
from app.schemas.location_point import LocationPointCreate, LocationPointOut
from app.services import location_service

router = APIRouter()


@router.post("/locations", response_model=LocationPointOut,
             status_code=status.HTTP_201_CREATED, summary="recordLocationPoint")
def record_location_point(body: LocationPointCreate, db: Session = Depends(get_db)):
    """Append a GPS sample. 404 if the officer/vehicle does not exist."""
    return location_service.record_location(db, body)


@router.get("/locations/current", response_model=list[LocationPointOut], summary="getCurrentLocations")
def get_current_locations(db: Session = Depends(get_db)):
    """Latest known position of every on-duty officer and active vehicle."""
    return location_service.get_current_locations(db)


@router.get("/locations/history", response_model=list[LocationPointOut], summary="getLocationHistory")
def get_location_history(
    entity_type: EntityType,
    entity_id: int,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    limit: int = Query(default=settings.LOCATION_HISTORY_DEFAULT_LIMIT,
                       ge=1, le=settings.LOCATION_HISTORY_MAX_LIMIT),
    db: Session = Depends(get_db),
):
    """One entity's points, newest first. start_date/end_date are inclusive."""
    return location_service.get_location_history(
        db, entity_type, entity_id,
        start_date=to_naive_utc(start_date),
        end_date=to_naive_utc(end_date),
        limit=limit,
    )
