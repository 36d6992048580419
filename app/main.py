# app/main.py
import logging

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import settings
from app.db.session import engine
from app.db.mixins import Base
# load DB models so Base.metadata is populated
import app.db.models  # noqa: F401

# Routers
from app.api.v1.airplanes import router as airplanes_api_router
from app.web.routes import router as ui_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("create_all done. Tables: %s", list(Base.metadata.tables.keys()))

# Middleware
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    same_site="lax",
    https_only=False,
)

# Routers
app.include_router(airplanes_api_router, prefix="/api/v1", tags=["airplanes"])
app.include_router(ui_router)

@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
