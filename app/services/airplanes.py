# app/services/airplanes.py
"""
Airplane operations shared by the HTML views and the JSON API.

Every write goes through the same steps:
- keep only the permitted fields (AirplaneCreate)
- run validate_airplane()
- insert and commit in a single transaction
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.models.airplane import Airplane
from app.schemas.airplane import AirplaneCreate

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 6

# ids are signed 64-bit integers in every supported backend
MAX_ID = 2**63 - 1

MSG_BLANK = "Name can't be blank"
MSG_TOO_SHORT = f"Name is too short (minimum is {NAME_MIN_LENGTH} characters)"
MSG_TAKEN = "Name has already been taken"


class AirplaneError(Exception):
    """Base class for airplane service errors."""


class AirplaneValidationError(AirplaneError):
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class AirplaneNotFound(AirplaneError):
    def __init__(self, airplane_id: int):
        self.airplane_id = airplane_id
        super().__init__(f"Airplane {airplane_id} not found")


# ----------------- Input whitelist -----------------

def airplane_params(data: Mapping[str, Any] | AirplaneCreate) -> AirplaneCreate:
    """Reduce untrusted input to name + description."""
    if isinstance(data, AirplaneCreate):
        return data
    return AirplaneCreate.model_validate(dict(data))


# ----------------- Validation -----------------

def name_errors(name: str | None) -> List[str]:
    """Presence and length rules. The length is measured untrimmed."""
    errors: List[str] = []
    if name is None or not name.strip():
        errors.append(MSG_BLANK)
    if len(name or "") < NAME_MIN_LENGTH:
        errors.append(MSG_TOO_SHORT)
    return errors


def name_taken(db: Session, name: str) -> bool:
    stmt = select(Airplane.id).where(Airplane.name == name).limit(1)
    return db.execute(stmt).first() is not None


def validate_airplane(db: Session, candidate: Airplane) -> List[str]:
    """Return the violated rules for candidate; an empty list means valid."""
    errors = name_errors(candidate.name)
    if candidate.name and name_taken(db, candidate.name):
        errors.append(MSG_TAKEN)
    return errors


# ----------------- Operations -----------------

def list_airplanes(db: Session) -> List[Airplane]:
    return list(db.scalars(select(Airplane).order_by(Airplane.id.asc())))


def new_airplane() -> Airplane:
    return Airplane()


def get_airplane(db: Session, airplane_id: int) -> Airplane:
    if not 1 <= airplane_id <= MAX_ID:
        raise AirplaneNotFound(airplane_id)
    airplane = db.get(Airplane, airplane_id)
    if airplane is None:
        raise AirplaneNotFound(airplane_id)
    return airplane


def create_airplane(db: Session, data: Mapping[str, Any] | AirplaneCreate) -> Airplane:
    """
    Validate and insert one airplane.
    Raises AirplaneValidationError with every violated rule; nothing is written then.
    """
    params = airplane_params(data)
    airplane = Airplane(name=params.name, description=params.description)

    errors = validate_airplane(db, airplane)
    if errors:
        db.rollback()
        logger.info("Rejected airplane %r: %s", params.name, errors)
        raise AirplaneValidationError(errors)

    db.add(airplane)
    try:
        db.commit()
    except IntegrityError as e:
        # unique constraint caught a concurrent insert of the same name
        db.rollback()
        logger.info("Rejected airplane %r: unique constraint", params.name)
        raise AirplaneValidationError([MSG_TAKEN]) from e

    db.refresh(airplane)
    logger.info("Created airplane id=%s name=%r", airplane.id, airplane.name)
    return airplane


def count_airplanes(db: Session) -> int:
    return db.query(Airplane).count()
