import logging

from app.core.config import settings
from app.db.mixins import Base
from app.db.session import SessionLocal, engine
from app.services.airplanes import count_airplanes
from app.services.seed import seed_airplanes

logger = logging.getLogger("seed_airplanes")


def main():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_airplanes(db)
        count = count_airplanes(db)
        logger.info("Seed complete. Total airplanes in DB: %s", count)
    except Exception:
        logger.exception("Seed failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
