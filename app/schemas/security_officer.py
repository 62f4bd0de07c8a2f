# app/schemas/security_officer.py
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional
from app.models.enums import OfficerStatus


class SecurityOfficerCreate(BaseModel):
    name: str = Field(min_length=1)
    badge_number: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    status: Optional[OfficerStatus] = None   # defaults to active


class SecurityOfficerOut(BaseModel):
    id: int
    name: str
    badge_number: str
    phone: Optional[str]
    email: Optional[str]
    status: OfficerStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
