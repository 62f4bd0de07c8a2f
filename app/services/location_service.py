# app/services/location_service.py
"""
Location Ledger: append-only GPS samples for officers and vehicles.

- record_location: checks the entity exists, then inserts one point
- get_location_history: one entity's points, newest first, bounded by limit
- get_current_locations: latest point per on-duty officer / active vehicle
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import and_, func
from sqlalchemy.orm import Session
from app.config import settings
from app.models.location_point import LocationPoint
from app.models.security_officer import SecurityOfficer
from app.models.corporate_vehicle import CorporateVehicle
from app.models.enums import EntityType, OfficerStatus, VehicleStatus
from app.schemas.location_point import LocationPointCreate
from app.services.entity_service import ensure_entity_exists
from app.utils.errors import store_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.LOCATION_HISTORY_DEFAULT_LIMIT
    return max(1, min(limit, settings.LOCATION_HISTORY_MAX_LIMIT))


def record_location(db: Session, body: LocationPointCreate) -> LocationPoint:
    ensure_entity_exists(db, body.entity_type, body.entity_id)

    point = LocationPoint(
        entity_type=body.entity_type,
        entity_id=body.entity_id,
        latitude=body.latitude,
        longitude=body.longitude,
        altitude=body.altitude,
        accuracy=body.accuracy,
        heading=body.heading,
        speed=body.speed,
        timestamp=body.timestamp or datetime.utcnow(),
    )
    with store_errors(db, f"Record location for {body.entity_type.value} {body.entity_id}"):
        db.add(point)
        db.commit()
        db.refresh(point)

    logger.info(
        f"[LOCATION] {point.entity_type.value}:{point.entity_id} "
        f"({point.latitude}, {point.longitude}) at {point.timestamp}"
    )
    return point


def get_location_history(
    db: Session,
    entity_type: EntityType,
    entity_id: int,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> list[LocationPoint]:
    """Points for one entity, newest first. Date bounds are inclusive."""
    q = db.query(LocationPoint).filter(
        LocationPoint.entity_type == entity_type,
        LocationPoint.entity_id == entity_id,
    )
    if start_date:
        q = q.filter(LocationPoint.timestamp >= start_date)
    if end_date:
        q = q.filter(LocationPoint.timestamp <= end_date)

    with store_errors(db, f"Load location history for {entity_type} {entity_id}"):
        return (
            q.order_by(LocationPoint.timestamp.desc(), LocationPoint.id.desc())
            .limit(clamp_limit(limit))
            .all()
        )


def get_current_locations(db: Session) -> list[LocationPoint]:
    """
    Latest point for every on-duty officer and every active vehicle.
    Entities with no points are absent. Equal timestamps resolve to the
    highest point id.
    """
    ranked = (
        db.query(
            LocationPoint.id.label("point_id"),
            func.row_number().over(
                partition_by=(LocationPoint.entity_type, LocationPoint.entity_id),
                order_by=(LocationPoint.timestamp.desc(), LocationPoint.id.desc()),
            ).label("rn"),
        )
        .subquery()
    )
    latest = (
        db.query(LocationPoint)
        .join(ranked, ranked.c.point_id == LocationPoint.id)
        .filter(ranked.c.rn == 1)
    )

    officers = (
        latest.join(SecurityOfficer, and_(
            LocationPoint.entity_type == EntityType.security_officer,
            SecurityOfficer.id == LocationPoint.entity_id,
        ))
        .filter(SecurityOfficer.status == OfficerStatus.on_duty)
        .order_by(LocationPoint.entity_id)
    )
    vehicles = (
        latest.join(CorporateVehicle, and_(
            LocationPoint.entity_type == EntityType.corporate_vehicle,
            CorporateVehicle.id == LocationPoint.entity_id,
        ))
        .filter(CorporateVehicle.status == VehicleStatus.active)
        .order_by(LocationPoint.entity_id)
    )

    with store_errors(db, "Load current locations"):
        return officers.all() + vehicles.all()
