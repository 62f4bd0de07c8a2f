# app/services/route_service.py
"""
Route Ledger: named time spans of an entity's movement.

Routes start 'active' and are closed by update_route with caller-supplied
end_time / total_distance / total_duration. Status changes are not
restricted: any status may be written at any time.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.route import Route
from app.models.enums import EntityType, RouteStatus
from app.schemas.route import RouteCreate, RouteUpdate
from app.services.entity_service import ensure_entity_exists
from app.utils.errors import NotFound, store_errors
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_route(db: Session, body: RouteCreate) -> Route:
    ensure_entity_exists(db, body.entity_type, body.entity_id)

    route = Route(
        entity_type=body.entity_type,
        entity_id=body.entity_id,
        route_name=body.route_name,
        start_time=body.start_time or datetime.utcnow(),
        status=RouteStatus.active,
    )
    with store_errors(db, f"Create route for {body.entity_type.value} {body.entity_id}"):
        db.add(route)
        db.commit()
        db.refresh(route)

    logger.info(f"[ROUTE] Route {route.id} started for {route.entity_type.value}:{route.entity_id}")
    return route


def update_route(db: Session, route_id: int, patch: RouteUpdate) -> Route:
    """Apply only the fields present in the patch; explicit nulls clear."""
    changes = patch.changes()
    with store_errors(db, f"Update route {route_id}"):
        route = db.query(Route).filter(Route.id == route_id).first()
        if not route:
            logger.warning(f"[ROUTE] Route {route_id} not found")
            raise NotFound(f"Route with id {route_id} not found")

        for field, value in changes.items():
            setattr(route, field, value)
        db.commit()
        db.refresh(route)

    logger.info(f"[ROUTE] Route {route_id} updated: {sorted(changes)} → status={route.status.value}")
    return route


def get_route_history(
    db: Session,
    entity_type: Optional[EntityType] = None,
    entity_id: Optional[int] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    status: Optional[RouteStatus] = None,
) -> list[Route]:
    """Routes matching every given filter, newest start first. Dates bound start_time."""
    q = db.query(Route)
    if entity_type:
        q = q.filter(Route.entity_type == entity_type)
    if entity_id is not None:
        q = q.filter(Route.entity_id == entity_id)
    if start_date:
        q = q.filter(Route.start_time >= start_date)
    if end_date:
        q = q.filter(Route.start_time <= end_date)
    if status:
        q = q.filter(Route.status == status)

    with store_errors(db, "Load route history"):
        return q.order_by(Route.start_time.desc(), Route.id.desc()).all()
