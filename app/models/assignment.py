# app/models/assignment.py
"""
Vehicle ↔ driver assignment ledger.
Rows are never deleted: unassigning sets status='inactive' and unassigned_at.
The partial unique index keeps at most one active row per vehicle, even if
two assign calls race.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, text
from app.database import Base
from app.models.enums import AssignmentStatus, sql_enum


class VehicleDriverAssignment(Base):
    __tablename__ = "vehicle_driver_assignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("corporate_vehicles.id"), nullable=False, index=True)
    driver_id = Column(Integer, ForeignKey("drivers.id"), nullable=False, index=True)
    assigned_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    unassigned_at = Column(DateTime)          # null while active
    status = Column(sql_enum(AssignmentStatus, "assignment_status"),
                    default=AssignmentStatus.active, nullable=False)

    __table_args__ = (
        Index(
            "uq_active_assignment_per_vehicle",
            "vehicle_id",
            unique=True,
            postgresql_where=text("status = 'active'"),
            sqlite_where=text("status = 'active'"),
        ),
    )

    def __repr__(self):
        return f"<VehicleDriverAssignment {self.id} vehicle={self.vehicle_id} driver={self.driver_id} status={self.status}>"
