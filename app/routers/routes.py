# app/routers/routes.py
"""Route Ledger endpoints."""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, status as http_status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.enums import EntityType, RouteStatus
from app.schemas.common import to_naive_utc
from app.schemas.route import RouteCreate, RouteOut, RouteUpdate
from app.services import route_service

router = APIRouter()


@router.post("/routes", response_model=RouteOut,
             status_code=http_status.HTTP_201_CREATED, summary="createRoute")
def create_route(body: RouteCreate, db: Session = Depends(get_db)):
    return route_service.create_route(db, body)


@router.patch("/routes/{route_id}", response_model=RouteOut, summary="updateRoute")
def update_route(route_id: int, body: RouteUpdate, db: Session = Depends(get_db)):
    """
    Partial update. Omitted fields are left unchanged; fields sent as null
    are cleared (status cannot be null).
    """
    return route_service.update_route(db, route_id, body)


@router.get("/routes/history", response_model=list[RouteOut], summary="getRouteHistory")
def get_route_history(
    entity_type: Optional[EntityType] = None,
    entity_id: Optional[int] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    status: Optional[RouteStatus] = None,
    db: Session = Depends(get_db),
):
    """Routes matching all given filters, newest first. Dates bound start_time."""
    return route_service.get_route_history(
        db,
        entity_type=entity_type,
        entity_id=entity_id,
        start_date=to_naive_utc(start_date),
        end_date=to_naive_utc(end_date),
        status=status,
    )
