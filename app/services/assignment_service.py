# app/services/assignment_service.py
"""
Assignment Ledger: which driver currently drives which vehicle.

assign_driver deactivates the vehicle's current assignment and inserts the new
one in a single transaction. The vehicle row is locked FOR UPDATE first, so two
concurrent assigns on the same vehicle run one after the other; the partial
unique index on active rows backs this up at the store level.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.assignment import VehicleDriverAssignment
from app.models.enums import AssignmentStatus
from app.services.entity_service import get_driver, get_vehicle
from app.utils.errors import store_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _active_assignments(db: Session, vehicle_id: int):
    return db.query(VehicleDriverAssignment).filter(
        VehicleDriverAssignment.vehicle_id == vehicle_id,
        VehicleDriverAssignment.status == AssignmentStatus.active,
    )


def assign_driver(db: Session, vehicle_id: int, driver_id: int) -> VehicleDriverAssignment:
    with store_errors(db, f"Assign driver {driver_id} to vehicle {vehicle_id}"):
        get_vehicle(db, vehicle_id, lock=True)
        get_driver(db, driver_id)

        now = datetime.utcnow()
        for previous in _active_assignments(db, vehicle_id).all():
            previous.status = AssignmentStatus.inactive
            previous.unassigned_at = now
            logger.info(f"[ASSIGN] Vehicle {vehicle_id}: driver {previous.driver_id} unassigned")
        db.flush()  # old row must be inactive before the new active row is inserted

        assignment = VehicleDriverAssignment(
            vehicle_id=vehicle_id,
            driver_id=driver_id,
            status=AssignmentStatus.active,
            assigned_at=now,
        )
        db.add(assignment)
        db.commit()
        db.refresh(assignment)

    logger.info(f"[ASSIGN] Vehicle {vehicle_id}: driver {driver_id} assigned (assignment {assignment.id})")
    return assignment


def unassign_driver(db: Session, vehicle_id: int) -> Optional[VehicleDriverAssignment]:
    """End the vehicle's active assignment. Returns None when there is none."""
    with store_errors(db, f"Unassign driver from vehicle {vehicle_id}"):
        assignment = _active_assignments(db, vehicle_id).with_for_update().first()
        if assignment is None:
            logger.info(f"[ASSIGN] Vehicle {vehicle_id} has no active assignment")
            return None

        assignment.status = AssignmentStatus.inactive
        assignment.unassigned_at = datetime.utcnow()
        db.commit()
        db.refresh(assignment)

    logger.info(f"[ASSIGN] Vehicle {vehicle_id}: driver {assignment.driver_id} unassigned")
    return assignment


def list_assignments(db: Session) -> list[VehicleDriverAssignment]:
    """All assignments, active and historical."""
    with store_errors(db, "List vehicle-driver assignments"):
        return db.query(VehicleDriverAssignment).order_by(VehicleDriverAssignment.id).all()
