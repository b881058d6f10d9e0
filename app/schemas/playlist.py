
# ============================================================================
# FILE: app/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import datetime

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: Optional[str] = None
    description: Optional[str] = None

class PlaylistUpdate(BaseModel):
    """Schema for updating a playlist; only fields sent are applied"""
    name: Optional[str] = None
    description: Optional[str] = None

class PlaylistTrackAdd(BaseModel):
    """Schema for adding a catalog track to a playlist"""
    track_id: Optional[str] = None
    track_title: Optional[str] = None
    artist_name: Optional[str] = None

class TrackRef(BaseModel):
    """Typed reference to a track, either by local id or by catalog id"""
    kind: Literal["local", "external"]
    value: str = Field(min_length=1)

class PlaylistTrackResponse(BaseModel):
    """A member track of a playlist"""
    id: int
    title: str
    artist_name: str
    external_id: str
    added_at: datetime

class PlaylistItemResponse(BaseModel):
    """A freshly created membership row"""
    id: int
    playlist_id: int
    track_id: int
    added_at: datetime

    class Config:
        from_attributes = True

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: int
    owner_id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class PlaylistDetailResponse(PlaylistResponse):
    tracks: List[PlaylistTrackResponse] = []

class PlaylistListResponse(BaseModel):
    items: List[PlaylistResponse]
