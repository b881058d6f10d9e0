# ============================================================================
# FILE: app/schemas/music.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List

class SearchItem(BaseModel):
    """A catalog track as returned to the frontend"""
    id: str
    title: str
    artist: str = ""
    artwork: str = ""
    duration: Optional[int] = None

class SearchResponse(BaseModel):
    items: List[SearchItem]
