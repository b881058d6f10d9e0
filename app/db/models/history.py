
# ============================================================================
# FILE: app/db/models/history.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow

class PlayEvent(Base):
    """Append-only record of a track played by a user"""
    __tablename__ = "listening_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    track_id = Column(Integer, ForeignKey("tracks.id"), nullable=False)
    listened_at = Column(DateTime, default=utcnow, index=True)
    seconds_listened = Column(Integer, nullable=True)

    # Relationships
    user = relationship("User", back_populates="plays")
    track = relationship("Track", lazy="joined")
