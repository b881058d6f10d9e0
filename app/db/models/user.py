
# ============================================================================
# FILE: app/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow

class User(Base):
    """User profile; the id doubles as the placeholder bearer token"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    avatar_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    # Relationships
    playlists = relationship("Playlist", back_populates="owner", cascade="all, delete-orphan")
    plays = relationship("PlayEvent", back_populates="user", cascade="all, delete-orphan")
