# ============================================================================
# FILE: app/services/ownership.py
# ============================================================================
from typing import Optional
from app.core.errors import NotFound
from app.db.models.playlist import Playlist

PLAYLIST_NOT_FOUND = "Playlist not found"

def authorize(principal_id: str, playlist: Optional[Playlist]) -> bool:
    """True only when the principal owns the playlist"""
    return playlist is not None and playlist.owner_id == principal_id

def ensure_owned(principal_id: str, playlist: Optional[Playlist]) -> Playlist:
    """
    Return the playlist if the principal owns it

    Missing and foreign playlists raise the same NotFound so that
    non-owners cannot probe for existence.
    """
    if not authorize(principal_id, playlist):
        raise NotFound(PLAYLIST_NOT_FOUND)
    return playlist
