# app/services/dashboard_service.py
"""
Aggregation Service: supervisor dashboard counts.
Each figure is its own query; no snapshot isolation across them.
"""

from datetime import datetime, timedelta
from sqlalchemy import distinct, func
from sqlalchemy.orm import Session
from app.config import settings
from app.models.security_officer import SecurityOfficer
from app.models.corporate_vehicle import CorporateVehicle
from app.models.assignment import VehicleDriverAssignment
from app.models.location_point import LocationPoint
from app.models.route import Route
from app.models.enums import AssignmentStatus, OfficerStatus, RouteStatus, VehicleStatus
from app.schemas.dashboard import DashboardOut
from app.schemas.location_point import LocationPointOut
from app.utils.errors import store_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def count_officers(db: Session, status: OfficerStatus) -> int:
    return db.query(func.count(SecurityOfficer.id)).filter(SecurityOfficer.status == status).scalar() or 0


def count_vehicles(db: Session, status: VehicleStatus) -> int:
    return db.query(func.count(CorporateVehicle.id)).filter(CorporateVehicle.status == status).scalar() or 0


def count_vehicles_in_use(db: Session) -> int:
    """Distinct active vehicles that have an active driver assignment."""
    return (
        db.query(func.count(distinct(VehicleDriverAssignment.vehicle_id)))
        .select_from(VehicleDriverAssignment)
        .join(CorporateVehicle, CorporateVehicle.id == VehicleDriverAssignment.vehicle_id)
        .filter(
            VehicleDriverAssignment.status == AssignmentStatus.active,
            VehicleDriverAssignment.unassigned_at.is_(None),
            CorporateVehicle.status == VehicleStatus.active,
        )
        .scalar()
    ) or 0


def count_active_routes(db: Session) -> int:
    return db.query(func.count(Route.id)).filter(Route.status == RouteStatus.active).scalar() or 0


def recent_location_updates(db: Session) -> list[LocationPoint]:
    now = datetime.utcnow()
    since = now - timedelta(hours=settings.DASHBOARD_RECENT_WINDOW_HOURS)
    return (
        db.query(LocationPoint)
        .filter(LocationPoint.timestamp >= since, LocationPoint.timestamp <= now)
        .order_by(LocationPoint.timestamp.desc(), LocationPoint.id.desc())
        .limit(settings.DASHBOARD_RECENT_LIMIT)
        .all()
    )


def get_dashboard_data(db: Session) -> DashboardOut:
    with store_errors(db, "Build dashboard data"):
        data = DashboardOut(
            active_security_officers=count_officers(db, OfficerStatus.active),
            officers_on_duty=count_officers(db, OfficerStatus.on_duty),
            active_vehicles=count_vehicles(db, VehicleStatus.active),
            vehicles_in_use=count_vehicles_in_use(db),
            total_active_routes=count_active_routes(db),
            recent_location_updates=[
                LocationPointOut.model_validate(p) for p in recent_location_updates(db)
            ],
        )
    logger.debug(
        f"[DASHBOARD] officers={data.active_security_officers} on_duty={data.officers_on_duty} "
        f"vehicles={data.active_vehicles} in_use={data.vehicles_in_use} routes={data.total_active_routes}"
    )
    return data
