# app/schemas/route.py
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional
from app.models.enums import EntityType, RouteStatus
from app.schemas.common import UtcDatetime


class RouteCreate(BaseModel):
    entity_type: EntityType
    entity_id: int
    route_name: Optional[str] = None
    start_time: Optional[UtcDatetime] = None  # defaults to write time


class RouteUpdate(BaseModel):
    """
    Partial update. A field left out of the request body is not touched;
    a field sent as null is cleared. Use `changes()` to get only the sent fields.
    """
    route_name: Optional[str] = None
    end_time: Optional[UtcDatetime] = None
    total_distance: Optional[float] = Field(default=None, ge=0, lt=100_000)   # NUMERIC(8,3)
    total_duration: Optional[int] = Field(default=None, ge=0, le=2_147_483_647)
    status: Optional[RouteStatus] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v):
        if v is None:
            raise ValueError("status cannot be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class RouteOut(BaseModel):
    id: int
    entity_type: EntityType
    entity_id: int
    route_name: Optional[str]
    start_time: datetime
    end_time: Optional[datetime]
    total_distance: Optional[float]
    total_duration: Optional[int]
    status: RouteStatus
    created_at: datetime

    class Config:
        from_attributes = True
