from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from app.core.deps import get_db
from app.schemas.airplane import AirplaneCreate, AirplaneOut
from app.services.airplanes import (
    AirplaneNotFound,
    AirplaneValidationError,
    create_airplane,
    get_airplane,
    list_airplanes,
)

router = APIRouter(prefix="/airplanes", tags=["airplanes"])

@router.post("", response_model=AirplaneOut, status_code=status.HTTP_201_CREATED)
def create_airplane_api(payload: AirplaneCreate, db: Session = Depends(get_db)):
    """
    Create an airplane.
    - Only name and description are read from the body
    - Returns 422 with the list of violated rules
    """
    try:
        return create_airplane(db, payload)
    except AirplaneValidationError as e:
        raise HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors)

@router.get("", response_model=List[AirplaneOut])
def list_airplanes_api(db: Session = Depends(get_db)):
    return list_airplanes(db)

@router.get("/{airplane_id}", response_model=AirplaneOut)
def get_airplane_api(airplane_id: int, db: Session = Depends(get_db)):
    try:
        return get_airplane(db, airplane_id)
    except AirplaneNotFound:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Airplane not found")
