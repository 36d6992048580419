from app.db.mixins import Base

# Import all models so Alembic can detect them
from app.db.models.airplane import Airplane  # noqa: F401
