# app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

DATABASE_URL = settings.DATABASE_URL.strip()


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # one connection is shared across the threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
    }


engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    future=True,
    **_engine_kwargs(DATABASE_URL),
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)
