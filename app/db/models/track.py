
# ============================================================================
# FILE: app/db/models/track.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from app.db.base import Base, utcnow

UNKNOWN_TITLE = "Unknown title"

class Track(Base):
    """Canonical local record of an external catalog track"""
    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True, index=True)
    # The unique index is the only arbiter of concurrent upserts
    external_id = Column(String, unique=True, index=True, nullable=False)
    title = Column(String, nullable=False, default=UNKNOWN_TITLE)
    artist_name = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utcnow)
