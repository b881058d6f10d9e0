# ============================================================================
# FILE: app/api/v1/endpoints/music.py
# ============================================================================
from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse
from app.api.dependencies import require_current_user, require_stream_user, get_music_service
from app.schemas.music import SearchResponse
from app.services.music_service import MusicService
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/search", response_model=SearchResponse)
async def search_tracks(
    q: str = Query("", description="Search query"),
    music: MusicService = Depends(get_music_service),
    current_user: User = Depends(require_current_user)
):
    """
    Search Audius tracks
    Requires authentication
    """
    return {"items": await music.search(q)}

@router.get("/tracks/{track_id}/stream")
async def stream_track(
    track_id: str,
    music: MusicService = Depends(get_music_service),
    current_user: User = Depends(require_stream_user)
):
    """
    Redirect to the Audius streaming URL so the browser streams directly
    Accepts ?token= because media elements cannot set headers
    """
    stream_url = music.stream_url(track_id)
    return RedirectResponse(stream_url, headers={"Cache-Control": "no-store"})
