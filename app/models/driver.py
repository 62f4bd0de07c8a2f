# app/models/driver.py
"""Drivers table (Entity Registry). Linked to vehicles through assignments."""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.models.enums import DriverStatus, sql_enum


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    license_number = Column(String(100), unique=True, nullable=False, index=True)
    phone = Column(String(50))
    email = Column(String(200))
    status = Column(sql_enum(DriverStatus, "driver_status"),
                    default=DriverStatus.active, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Driver {self.id} license={self.license_number} status={self.status}>"
