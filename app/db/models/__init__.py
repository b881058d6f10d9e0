# Import every model so Base.metadata knows all tables
from app.db.models.user import User
from app.db.models.track import Track
from app.db.models.playlist import Playlist, PlaylistItem
from app.db.models.history import PlayEvent

__all__ = ["User", "Track", "Playlist", "PlaylistItem", "PlayEvent"]
