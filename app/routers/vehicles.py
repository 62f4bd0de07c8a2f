# app/routers/vehicles.py
"""Entity Registry — corporate vehicle endpoints, plus unassign by vehicle."""

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.corporate_vehicle import (
    CorporateVehicleCreate, CorporateVehicleOut, CorporateVehicleWithDriverOut,
)
from app.schemas.assignment import AssignmentOut
from app.services import assignment_service, entity_service

router = APIRouter()


@router.post("/vehicles", response_model=CorporateVehicleOut,
             status_code=status.HTTP_201_CREATED, summary="createCorporateVehicle")
def create_corporate_vehicle(body: CorporateVehicleCreate, db: Session = Depends(get_db)):
    """Register a vehicle. Status defaults to active; license plates are unique."""
    return entity_service.create_vehicle(db, body)


@router.get("/vehicles",
            response_model=list[CorporateVehicleWithDriverOut], response_model_exclude_unset=True,
            summary="getCorporateVehicles")
def get_corporate_vehicles(include_driver: bool = False, db: Session = Depends(get_db)):
    """All vehicles. With include_driver=true each row carries its current driver."""
    if include_driver:
        return entity_service.list_vehicles_with_driver(db)
    return entity_service.list_vehicles(db)


@router.post("/vehicles/{vehicle_id}/unassign", response_model=Optional[AssignmentOut],
             summary="unassignDriverFromVehicle")
def unassign_driver_from_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    """End the vehicle's active assignment. Returns null if it had none."""
    return assignment_service.unassign_driver(db, vehicle_id)
