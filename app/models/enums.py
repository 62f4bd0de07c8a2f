# app/models/enums.py
"""
Closed string value sets used by both the ORM columns and the Pydantic schemas.
Each Python enum is persisted as a named SQL enum type.
"""

import enum
from functools import lru_cache

from sqlalchemy import Enum


class OfficerStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"
    on_duty = "on_duty"
    off_duty = "off_duty"


class VehicleStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"
    out_of_service = "out_of_service"


class VehicleType(str, enum.Enum):
    sedan = "sedan"
    suv = "suv"
    truck = "truck"
    van = "van"
    motorcycle = "motorcycle"


class DriverStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"


class EntityType(str, enum.Enum):
    security_officer = "security_officer"
    corporate_vehicle = "corporate_vehicle"


class RouteStatus(str, enum.Enum):
    active = "active"
    completed = "completed"
    interrupted = "interrupted"


class AssignmentStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"


@lru_cache(maxsize=None)
def sql_enum(enum_cls, name: str):
    """
    SQLAlchemy Enum storing the member *values* (not names) under a named type.
    Cached so tables sharing a type (entity_type) share one Enum object.
    """
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])
