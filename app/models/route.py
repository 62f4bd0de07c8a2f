# app/models/route.py
"""
Route ledger — a named time span of one entity's movement.
Created active; closed by a caller-supplied update (completed / interrupted).
total_distance (km) and total_duration (minutes) are supplied by the caller.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index
from app.database import Base
from app.models.enums import EntityType, RouteStatus, sql_enum


class Route(Base):
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(sql_enum(EntityType, "entity_type"), nullable=False)
    entity_id = Column(Integer, nullable=False)
    route_name = Column(String(200))
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime)
    total_distance = Column(Numeric(8, 3, asdecimal=False))   # kilometers
    total_duration = Column(Integer)                          # minutes
    status = Column(sql_enum(RouteStatus, "route_status"),
                    default=RouteStatus.active, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_routes_entity", "entity_type", "entity_id"),
    )

    def __repr__(self):
        return f"<Route {self.id} {self.entity_type}:{self.entity_id} status={self.status}>"
