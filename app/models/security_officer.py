# app/models/security_officer.py
"""
Security officers table (Entity Registry).
Officers are trackable entities: location points and routes reference them
with entity_type='security_officer'.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base
from app.models.enums import OfficerStatus, sql_enum


class SecurityOfficer(Base):
    __tablename__ = "security_officers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    badge_number = Column(String(100), unique=True, nullable=False, index=True)
    phone = Column(String(50))
    email = Column(String(200))
    status = Column(sql_enum(OfficerStatus, "security_officer_status"),
                    default=OfficerStatus.active, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<SecurityOfficer {self.id} badge={self.badge_number} status={self.status}>"
