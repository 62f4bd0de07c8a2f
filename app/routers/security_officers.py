# app/routers/security_officers.py
"""Entity Registry — security officer endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.security_officer import SecurityOfficerCreate, SecurityOfficerOut
from app.services import entity_service

router = APIRouter()


@router.post("/security-officers", response_model=SecurityOfficerOut,
             status_code=status.HTTP_201_CREATED, summary="createSecurityOfficer")
def create_security_officer(body: SecurityOfficerCreate, db: Session = Depends(get_db)):
    """Register an officer. Status defaults to active; badge numbers are unique."""
    return entity_service.create_officer(db, body)


@router.get("/security-officers", response_model=list[SecurityOfficerOut], summary="getSecurityOfficers")
def get_security_officers(db: Session = Depends(get_db)):
    return entity_service.list_officers(db)
