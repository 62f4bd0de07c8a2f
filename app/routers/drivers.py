# app/routers/drivers.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.driver import DriverCreate, DriverOut
from app.services import entity_service

router = APIRouter()


@router.post("/drivers", response_model=DriverOut,
             status_code=status.HTTP_201_CREATED, summary="createDriver")
def create_driver(body: DriverCreate, db: Session = Depends(get_db)):
    return entity_service.create_driver(db, body)


@router.get("/drivers", response_model=list[DriverOut], summary="getDrivers")
def get_drivers(db: Session = Depends(get_db)):
    return entity_service.list_drivers(db)
