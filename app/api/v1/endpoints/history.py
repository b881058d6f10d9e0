# ============================================================================
# FILE: app/api/v1/endpoints/history.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from app.api.dependencies import require_current_user, get_history_service
from app.schemas.history import PlayCreate, PlayEventCreated, PlayListResponse, SummaryResponse
from app.services.history_service import HistoryService
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/recently-played", response_model=PlayListResponse)
def get_recently_played(
    history: HistoryService = Depends(get_history_service),
    current_user: User = Depends(require_current_user)
):
    """
    Get the user's most recent plays
    Requires authentication
    """
    return {"items": history.list_plays(current_user.id)}

@router.post("/recently-played", response_model=PlayEventCreated, status_code=status.HTTP_201_CREATED)
def record_play(
    payload: PlayCreate,
    history: HistoryService = Depends(get_history_service),
    current_user: User = Depends(require_current_user)
):
    """
    Log a play of a catalog track
    Requires authentication
    """
    return history.record_play(
        current_user.id,
        payload.audius_track_id or payload.track_id,
        payload.track_title,
        payload.artist_name,
        payload.seconds_listened,
    )

@router.get("/stats/summary", response_model=SummaryResponse)
def get_summary(
    history: HistoryService = Depends(get_history_service),
    current_user: User = Depends(require_current_user)
):
    """Total plays from the listening history"""
    return {"totalPlays": history.summary(current_user.id)["total_plays"]}
