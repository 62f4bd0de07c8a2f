# app/schemas/corporate_vehicle.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.models.enums import VehicleStatus, VehicleType


class CorporateVehicleCreate(BaseModel):
    license_plate: str = Field(min_length=1)
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int = Field(ge=1900, le=2100)
    vehicle_type: VehicleType
    status: Optional[VehicleStatus] = None   # defaults to active


class CorporateVehicleOut(BaseModel):
    id: int
    license_plate: str
    make: str
    model: str
    year: int
    vehicle_type: VehicleType
    status: VehicleStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CorporateVehicleWithDriverOut(CorporateVehicleOut):
    """Vehicle row plus its current active driver, if any."""
    assigned_driver_id: Optional[int] = None
    assigned_driver_name: Optional[str] = None
