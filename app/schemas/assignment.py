# app/schemas/assignment.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from app.models.enums import AssignmentStatus


class AssignDriverRequest(BaseModel):
    vehicle_id: int
    driver_id: int


class AssignmentOut(BaseModel):
    id: int
    vehicle_id: int
    driver_id: int
    assigned_at: datetime
    unassigned_at: Optional[datetime]
    status: AssignmentStatus

    class Config:
        from_attributes = True
