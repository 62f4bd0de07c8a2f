# app/models/location_point.py
"""
Location ledger — append-only GPS samples.
entity_id is polymorphic (officer or vehicle depending on entity_type), so no
foreign key is declared; writers check existence before insert.
Numeric columns keep fixed precision on disk and are read back as floats.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, Numeric, DateTime, Index
from app.database import Base
from app.models.enums import EntityType, sql_enum


class LocationPoint(Base):
    __tablename__ = "location_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(sql_enum(EntityType, "entity_type"), nullable=False)
    entity_id = Column(Integer, nullable=False)
    latitude = Column(Numeric(10, 8, asdecimal=False), nullable=False)
    longitude = Column(Numeric(11, 8, asdecimal=False), nullable=False)
    altitude = Column(Numeric(8, 2, asdecimal=False))
    accuracy = Column(Numeric(6, 2, asdecimal=False))
    heading = Column(Numeric(5, 2, asdecimal=False))     # 0-360 degrees
    speed = Column(Numeric(6, 2, asdecimal=False))       # km/h
    timestamp = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_location_points_entity_time", "entity_type", "entity_id", "timestamp"),
    )

    def __repr__(self):
        return (f"<LocationPoint {self.id} {self.entity_type}:{self.entity_id} "
                f"({self.latitude}, {self.longitude}) at={self.timestamp}>")
