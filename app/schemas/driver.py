# app/schemas/driver.py
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional
from app.models.enums import DriverStatus


class DriverCreate(BaseModel):
    name: str = Field(min_length=1)
    license_number: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    status: Optional[DriverStatus] = None    # defaults to active


class DriverOut(BaseModel):
    id: int
    name: str
    license_number: str
    phone: Optional[str]
    email: Optional[str]
    status: DriverStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
