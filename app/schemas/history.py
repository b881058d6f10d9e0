
# ============================================================================
# FILE: app/schemas/history.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class PlayCreate(BaseModel):
    """Log a play; track_id is accepted as an alias of audius_track_id"""
    audius_track_id: Optional[str] = None
    track_id: Optional[str] = None
    track_title: Optional[str] = None
    artist_name: Optional[str] = None
    seconds_listened: Optional[int] = None

class PlayTrack(BaseModel):
    id: int
    title: str
    artist_name: str
    external_id: str

class PlayEventResponse(BaseModel):
    """A play event joined with its track's display fields"""
    id: int
    listened_at: datetime
    seconds_listened: Optional[int] = None
    track: PlayTrack

class PlayEventCreated(BaseModel):
    id: int
    user_id: str
    track_id: int
    listened_at: datetime
    seconds_listened: Optional[int] = None

    class Config:
        from_attributes = True

class PlayListResponse(BaseModel):
    items: List[PlayEventResponse]

class SummaryResponse(BaseModel):
    totalPlays: int
