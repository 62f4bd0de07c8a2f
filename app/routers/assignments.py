# app/routers/assignments.py
"""Assignment Ledger endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.assignment import AssignDriverRequest, AssignmentOut
from app.services import assignment_service

router = APIRouter()


@router.post("/assignments", response_model=AssignmentOut,
             status_code=status.HTTP_201_CREATED, summary="assignDriverToVehicle")
def assign_driver_to_vehicle(body: AssignDriverRequest, db: Session = Depends(get_db)):
    """Assign a driver. Any current assignment of the vehicle is ended first."""
    return assignment_service.assign_driver(db, body.vehicle_id, body.driver_id)


@router.get("/assignments", response_model=list[AssignmentOut], summary="getVehicleDriverAssignments")
def get_vehicle_driver_assignments(db: Session = Depends(get_db)):
    """Every assignment, active and historical."""
    return assignment_service.list_assignments(db)
