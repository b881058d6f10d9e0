# ============================================================================
# FILE: app/services/playlist_service.py
# ============================================================================
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import NotFound, StorageError, ValidationError
from app.db.models.playlist import Playlist, PlaylistItem
from app.schemas.playlist import TrackRef
from app.services.ownership import PLAYLIST_NOT_FOUND, ensure_owned
from app.services.track_registry import TrackRegistry
import logging

logger = logging.getLogger(__name__)

# Ids outside a signed 64-bit integer cannot exist in the store
MAX_ID = 2 ** 63 - 1

class PlaylistService:
    """Service layer for playlist operations, always scoped to the owner"""

    def __init__(self, db: Session, track_registry: TrackRegistry):
        self.db = db
        self.track_registry = track_registry

    def list_playlists(self, principal_id: str) -> List[Playlist]:
        """Get all playlists owned by the principal, newest first"""
        try:
            return (
                self.db.query(Playlist)
                .filter(Playlist.owner_id == principal_id)
                .order_by(Playlist.created_at.desc(), Playlist.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing playlists for {principal_id}: {e}")
            raise StorageError("Failed to list playlists") from e

    def create_playlist(self, principal_id: str, name: Optional[str], description: Optional[str] = None) -> Playlist:
        """Create a new, empty playlist for the principal"""
        if not name or not name.strip():
            raise ValidationError("name")

        try:
            playlist = Playlist(owner_id=principal_id, name=name, description=description)
            self.db.add(playlist)
            self.db.commit()
            self.db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {principal_id}")
            return playlist
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise StorageError("Failed to create playlist") from e

    def get_playlist(self, principal_id: str, playlist_id: int) -> Dict[str, Any]:
        """
        Get a playlist with its member tracks, most recently added first

        Raises NotFound when the playlist is missing or owned by someone else.
        """
        playlist = self._get_owned(principal_id, playlist_id)
        try:
            items = (
                self.db.query(PlaylistItem)
                .filter(PlaylistItem.playlist_id == playlist.id)
                .order_by(PlaylistItem.added_at.desc(), PlaylistItem.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error loading tracks of playlist {playlist_id}: {e}")
            raise StorageError("Failed to load playlist tracks") from e

        return {
            "id": playlist.id,
            "owner_id": playlist.owner_id,
            "name": playlist.name,
            "description": playlist.description,
            "created_at": playlist.created_at,
            "updated_at": playlist.updated_at,
            "tracks": [
                {
                    "id": item.track.id,
                    "title": item.track.title,
                    "artist_name": item.track.artist_name,
                    "external_id": item.track.external_id,
                    "added_at": item.added_at,
                }
                for item in items
            ],
        }

    def update_playlist(self, principal_id: str, playlist_id: int, patch: Dict[str, Any]) -> Playlist:
        """Apply the name/description fields present in patch; others are untouched"""
        playlist = self._get_owned(principal_id, playlist_id)

        if "name" in patch and (not patch["name"] or not patch["name"].strip()):
            raise ValidationError("name", "name must not be empty")

        try:
            if "name" in patch:
                playlist.name = patch["name"]
            if "description" in patch:
                playlist.description = patch["description"]

            self.db.commit()
            self.db.refresh(playlist)
            logger.info(f"Playlist updated: {playlist_id}")
            return playlist
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise StorageError("Failed to update playlist") from e

    def delete_playlist(self, principal_id: str, playlist_id: int) -> None:
        """Delete a playlist together with its memberships"""
        playlist = self._get_owned(principal_id, playlist_id)

        try:
            self.db.delete(playlist)
            self.db.commit()
            logger.info(f"Playlist deleted: {playlist_id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise StorageError("Failed to delete playlist") from e

    def add_track(
        self,
        principal_id: str,
        playlist_id: int,
        external_track_id: Optional[str],
        title: Optional[str] = None,
        artist: Optional[str] = None,
    ) -> PlaylistItem:
        """
        Add a catalog track to a playlist

        The track is resolved through the registry first. Adding the same
        track twice creates two memberships.
        """
        playlist = self._get_owned(principal_id, playlist_id)
        if not external_track_id:
            raise ValidationError("track_id")

        track = self.track_registry.resolve(external_track_id, title, artist)

        try:
            item = PlaylistItem(playlist_id=playlist.id, track_id=track.id)
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
            logger.info(f"Track {track.id} added to playlist {playlist_id}")
            return item
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error adding track to playlist: {e}")
            raise StorageError("Failed to add track") from e

    def remove_track(self, principal_id: str, playlist_id: int, track_ref: TrackRef) -> int:
        """
        Remove every membership of a track from a playlist

        Returns how many rows were removed; zero is not an error.
        """
        playlist = self._get_owned(principal_id, playlist_id)

        if track_ref.kind == "external":
            track = self.track_registry.find(track_ref.value)
            if track is None:
                logger.info(f"Unknown external track {track_ref.value}, nothing to remove")
                return 0
            track_id = track.id
        else:
            try:
                track_id = int(track_ref.value)
            except ValueError:
                raise ValidationError("track_id", "local track id must be an integer")
            if not 0 < track_id <= MAX_ID:
                raise ValidationError("track_id", "local track id is out of range")

        try:
            removed = (
                self.db.query(PlaylistItem)
                .filter(PlaylistItem.playlist_id == playlist.id, PlaylistItem.track_id == track_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            logger.info(f"Removed {removed} membership(s) of track {track_id} from playlist {playlist_id}")
            return removed
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error removing track from playlist: {e}")
            raise StorageError("Failed to remove track") from e

    def _get_owned(self, principal_id: str, playlist_id: int) -> Playlist:
        if not 0 < playlist_id <= MAX_ID:
            raise NotFound(PLAYLIST_NOT_FOUND)
        try:
            playlist = self.db.get(Playlist, playlist_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading playlist {playlist_id}: {e}")
            raise StorageError("Failed to load playlist") from e
        return ensure_owned(principal_id, playlist)
