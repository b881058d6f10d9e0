# ============================================================================
# FILE: app/db/session.py
# ============================================================================
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator
from app.config import settings
import logging

logger = logging.getLogger(__name__)

def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine with the configured driver timeout"""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": settings.DATABASE_TIMEOUT_SECONDS}
    elif url.startswith("postgresql"):
        connect_args = {"connect_timeout": settings.DATABASE_TIMEOUT_SECONDS}

    engine = create_engine(url, connect_args=connect_args, **kwargs)

    if url.startswith("sqlite"):
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine

engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and always close it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
