# app/schemas/dashboard.py
from pydantic import BaseModel
from app.schemas.location_point import LocationPointOut


class DashboardOut(BaseModel):
    active_security_officers: int
    officers_on_duty: int
    active_vehicles: int
    vehicles_in_use: int
    total_active_routes: int
    recent_location_updates: list[LocationPointOut] = []

    class Config:
        from_attributes = True
