# app/models/corporate_vehicle.py
"""
Corporate vehicles table (Entity Registry).
Vehicles are trackable entities (entity_type='corporate_vehicle') and the
target side of driver assignments.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.models.enums import VehicleStatus, VehicleType, sql_enum


class CorporateVehicle(Base):
    __tablename__ = "corporate_vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    license_plate = Column(String(50), unique=True, nullable=False, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    vehicle_type = Column(sql_enum(VehicleType, "vehicle_type"), nullable=False)
    status = Column(sql_enum(VehicleStatus, "vehicle_status"),
                    default=VehicleStatus.active, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<CorporateVehicle {self.license_plate} {self.make} {self.model} status={self.status}>"
