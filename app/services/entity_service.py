# app/services/entity_service.py
"""
Entity Registry: security officers, corporate vehicles and drivers.
Also owns the polymorphic entity lookup used by the location and route ledgers.
"""

from typing import Optional
from sqlalchemy import and_
from sqlalchemy.orm import Session
from app.models.security_officer import SecurityOfficer
from app.models.corporate_vehicle import CorporateVehicle
from app.models.driver import Driver
from app.models.assignment import VehicleDriverAssignment
from app.models.enums import (
    AssignmentStatus, DriverStatus, EntityType, OfficerStatus, VehicleStatus,
)
from app.schemas.security_officer import SecurityOfficerCreate
from app.schemas.corporate_vehicle import (
    CorporateVehicleCreate, CorporateVehicleOut, CorporateVehicleWithDriverOut,
)
from app.schemas.driver import DriverCreate
from app.utils.errors import NotFound, store_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)

# entity_type -> table holding the referenced row
ENTITY_MODELS = {
    EntityType.security_officer: SecurityOfficer,
    EntityType.corporate_vehicle: CorporateVehicle,
}

ENTITY_LABELS = {
    EntityType.security_officer: "Security officer",
    EntityType.corporate_vehicle: "Corporate vehicle",
}


def _persist(db: Session, row, action: str):
    with store_errors(db, action):
        db.add(row)
        db.commit()
        db.refresh(row)
    return row


# ── Security officers ────────────────────────────────────────────────────────

def create_officer(db: Session, body: SecurityOfficerCreate) -> SecurityOfficer:
    officer = SecurityOfficer(
        name=body.name,
        badge_number=body.badge_number,
        phone=body.phone,
        email=body.email,
        status=body.status or OfficerStatus.active,
    )
    _persist(db, officer, f"Create security officer badge={body.badge_number}")
    logger.info(f"[REGISTRY] Officer {officer.id} created (badge={officer.badge_number}, status={officer.status.value})")
    return officer


def list_officers(db: Session) -> list[SecurityOfficer]:
    with store_errors(db, "List security officers"):
        return db.query(SecurityOfficer).order_by(SecurityOfficer.id).all()


def get_officer(db: Session, officer_id: int) -> SecurityOfficer:
    with store_errors(db, f"Load security officer {officer_id}"):
        officer = db.query(SecurityOfficer).filter(SecurityOfficer.id == officer_id).first()
    if not officer:
        raise NotFound(f"Security officer with ID {officer_id} not found")
    return officer


# ── Corporate vehicles ───────────────────────────────────────────────────────

def create_vehicle(db: Session, body: CorporateVehicleCreate) -> CorporateVehicle:
    vehicle = CorporateVehicle(
        license_plate=body.license_plate,
        make=body.make,
        model=body.model,
        year=body.year,
        vehicle_type=body.vehicle_type,
        status=body.status or VehicleStatus.active,
    )
    _persist(db, vehicle, f"Create vehicle plate={body.license_plate}")
    logger.info(f"[REGISTRY] Vehicle {vehicle.id} created (plate={vehicle.license_plate})")
    return vehicle


def list_vehicles(db: Session) -> list[CorporateVehicle]:
    with store_errors(db, "List corporate vehicles"):
        return db.query(CorporateVehicle).order_by(CorporateVehicle.id).all()


def list_vehicles_with_driver(db: Session) -> list[CorporateVehicleWithDriverOut]:
    """Vehicles left-joined to their active assignment's driver."""
    with store_errors(db, "List corporate vehicles with drivers"):
        rows = (
            db.query(CorporateVehicle, VehicleDriverAssignment.driver_id, Driver.name)
            .outerjoin(
                VehicleDriverAssignment,
                and_(
                    VehicleDriverAssignment.vehicle_id == CorporateVehicle.id,
                    VehicleDriverAssignment.status == AssignmentStatus.active,
                    VehicleDriverAssignment.unassigned_at.is_(None),
                ),
            )
            .outerjoin(Driver, Driver.id == VehicleDriverAssignment.driver_id)
            .order_by(CorporateVehicle.id)
            .all()
        )
    return [
        CorporateVehicleWithDriverOut(
            **CorporateVehicleOut.model_validate(vehicle).model_dump(),
            assigned_driver_id=driver_id,
            assigned_driver_name=driver_name,
        )
        for vehicle, driver_id, driver_name in rows
    ]


def get_vehicle(db: Session, vehicle_id: int, lock: bool = False) -> CorporateVehicle:
    """Load a vehicle; with lock=True the row is held FOR UPDATE until commit."""
    with store_errors(db, f"Load vehicle {vehicle_id}"):
        q = db.query(CorporateVehicle).filter(CorporateVehicle.id == vehicle_id)
        if lock:
            q = q.with_for_update()
        vehicle = q.first()
    if not vehicle:
        raise NotFound(f"Vehicle with ID {vehicle_id} not found")
    return vehicle


# ── Drivers ──────────────────────────────────────────────────────────────────

def create_driver(db: Session, body: DriverCreate) -> Driver:
    driver = Driver(
        name=body.name,
        license_number=body.license_number,
        phone=body.phone,
        email=body.email,
        status=body.status or DriverStatus.active,
    )
    _persist(db, driver, f"Create driver license={body.license_number}")
    logger.info(f"[REGISTRY] Driver {driver.id} created (license={driver.license_number})")
    return driver


def list_drivers(db: Session) -> list[Driver]:
    with store_errors(db, "List drivers"):
        return db.query(Driver).order_by(Driver.id).all()


def get_driver(db: Session, driver_id: int) -> Driver:
    with store_errors(db, f"Load driver {driver_id}"):
        driver = db.query(Driver).filter(Driver.id == driver_id).first()
    if not driver:
        raise NotFound(f"Driver with ID {driver_id} not found")
    return driver


# ── Polymorphic entities ─────────────────────────────────────────────────────

def find_entity(db: Session, entity_type: EntityType, entity_id: int) -> Optional[object]:
    model = ENTITY_MODELS[EntityType(entity_type)]
    with store_errors(db, f"Load {entity_type} {entity_id}"):
        return db.query(model).filter(model.id == entity_id).first()


def ensure_entity_exists(db: Session, entity_type: EntityType, entity_id: int):
    """Raise NotFound unless entity_id exists in the table implied by entity_type."""
    entity = find_entity(db, entity_type, entity_id)
    if entity is None:
        label = ENTITY_LABELS[EntityType(entity_type)]
        logger.warning(f"[REGISTRY] {label} {entity_id} not found")
        raise NotFound(f"{label} with ID {entity_id} not found")
    return entity
