# ============================================================================
# FILE: app/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, Query, status
from typing import Literal
from app.api.dependencies import require_current_user, get_playlist_service
from app.schemas.playlist import (
    PlaylistCreate,
    PlaylistUpdate,
    PlaylistResponse,
    PlaylistDetailResponse,
    PlaylistListResponse,
    PlaylistItemResponse,
    PlaylistTrackAdd,
    TrackRef,
)
from app.services.playlist_service import PlaylistService
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=PlaylistListResponse)
def list_playlists(
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    return {"items": playlists.list_playlists(current_user.id)}

@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
def create_playlist(
    payload: PlaylistCreate,
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Create a new playlist
    Requires authentication
    """
    return playlists.create_playlist(current_user.id, payload.name, payload.description)

@router.get("/{playlist_id}", response_model=PlaylistDetailResponse)
def get_playlist(
    playlist_id: int,
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Get a specific playlist and its tracks
    Requires authentication and ownership
    """
    return playlists.get_playlist(current_user.id, playlist_id)

@router.put("/{playlist_id}", response_model=PlaylistResponse)
def update_playlist(
    playlist_id: int,
    payload: PlaylistUpdate,
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Update playlist details (name, description)
    Requires authentication and ownership
    """
    return playlists.update_playlist(current_user.id, playlist_id, payload.model_dump(exclude_unset=True))

@router.delete("/{playlist_id}")
def delete_playlist(
    playlist_id: int,
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership
    """
    playlists.delete_playlist(current_user.id, playlist_id)
    return {"ok": True}

@router.post("/{playlist_id}/tracks", response_model=PlaylistItemResponse, status_code=status.HTTP_201_CREATED)
def add_track_to_playlist(
    playlist_id: int,
    payload: PlaylistTrackAdd,
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Add a catalog track to a playlist
    Requires authentication and ownership
    """
    return playlists.add_track(
        current_user.id, playlist_id, payload.track_id, payload.track_title, payload.artist_name
    )

@router.delete("/{playlist_id}/tracks/{track_ref}")
def remove_track_from_playlist(
    playlist_id: int,
    track_ref: str,
    by: Literal["external", "local"] = Query("external", description="Whether track_ref is a catalog id or a local track id"),
    playlists: PlaylistService = Depends(get_playlist_service),
    current_user: User = Depends(require_current_user)
):
    """
    Remove a track from a playlist
    Requires authentication and ownership
    """
    playlists.remove_track(current_user.id, playlist_id, TrackRef(kind=by, value=track_ref))
    return {"ok": True}
