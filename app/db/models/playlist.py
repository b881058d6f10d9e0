
# ============================================================================
# FILE: app/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.db.base import Base, utcnow

class Playlist(Base):
    """Playlist model for user-created playlists"""
    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("User", back_populates="playlists")
    items = relationship(
        "PlaylistItem",
        back_populates="playlist",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

class PlaylistItem(Base):
    """Membership of a track in a playlist; the same track may appear twice"""
    __tablename__ = "playlist_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    track_id = Column(Integer, ForeignKey("tracks.id"), nullable=False, index=True)
    added_at = Column(DateTime, default=utcnow)

    # Relationships
    playlist = relationship("Playlist", back_populates="items")
    track = relationship("Track", lazy="joined")
