# app/services/seed.py
from __future__ import annotations

import logging
from typing import List, Optional

from faker import Faker
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.models.airplane import Airplane
from app.services.airplanes import (
    MSG_TAKEN,
    AirplaneValidationError,
    validate_airplane,
)

logger = logging.getLogger(__name__)


def build_seed_data(faker: Faker, count: int) -> List[dict]:
    return [
        {
            "name": " ".join([faker.unique.company(), "Airlines"]),
            "description": faker.paragraph(),
        }
        for _ in range(count)
    ]


def seed_airplanes(
    db: Session,
    count: Optional[int] = None,
    faker: Optional[Faker] = None,
) -> List[Airplane]:
    """
    Replace every airplane with `count` generated ones.

    All-or-nothing: the delete and every insert share one transaction, so a
    record that fails validation leaves the table as it was.
    """
    count = settings.SEED_COUNT if count is None else count
    faker = faker or Faker()

    try:
        removed = db.execute(delete(Airplane)).rowcount
        logger.info("Seed: removed %s airplanes", removed)

        rows: List[Airplane] = []
        for data in build_seed_data(faker, count):
            airplane = Airplane(name=data["name"], description=data["description"])
            errors = validate_airplane(db, airplane)
            if errors:
                raise AirplaneValidationError([f"{data['name']}: {e}" for e in errors])
            db.add(airplane)
            # flush so the next uniqueness check sees this row
            db.flush()
            rows.append(airplane)

        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise AirplaneValidationError([MSG_TAKEN]) from e
    except Exception:
        db.rollback()
        raise

    logger.info("Seed: inserted %s airplanes", len(rows))
    return rows
