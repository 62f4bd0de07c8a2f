# app/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.dashboard import DashboardOut
from app.services.dashboard_service import get_dashboard_data

router = APIRouter()


@router.get("/dashboard", response_model=DashboardOut, summary="getDashboardData")
def get_dashboard(db: Session = Depends(get_db)):
    """Supervisor counts plus the latest location updates of the last 24 hours."""
    return get_dashboard_data(db)
