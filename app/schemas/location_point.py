# app/schemas/location_point.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.models.enums import EntityType
from app.schemas.common import UtcDatetime


class LocationPointCreate(BaseModel):
    entity_type: EntityType
    entity_id: int
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    # bounds follow the column precision: NUMERIC(8,2), NUMERIC(6,2)
    altitude: Optional[float] = Field(default=None, gt=-1_000_000, lt=1_000_000)
    accuracy: Optional[float] = Field(default=None, ge=0, lt=10_000)
    heading: Optional[float] = Field(default=None, ge=0, le=360)
    speed: Optional[float] = Field(default=None, ge=0, lt=10_000)
    timestamp: Optional[UtcDatetime] = None   # defaults to write time


class LocationPointOut(BaseModel):
    id: int
    entity_type: EntityType
    entity_id: int
    latitude: float
    longitude: float
    altitude: Optional[float]
    accuracy: Optional[float]
    heading: Optional[float]
    speed: Optional[float]
    timestamp: datetime
    created_at: datetime

    class Config:
        from_attributes = True
