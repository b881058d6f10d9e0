# ============================================================================
# FILE: app/services/music_service.py
# ============================================================================
from typing import Dict, List
from app.core.audius_client import AudiusClient
import logging

logger = logging.getLogger(__name__)

ARTWORK_SIZES = ("150x150", "480x480", "1000x1000")

class MusicService:
    """Service layer for catalog search and streaming"""

    def __init__(self, client: AudiusClient):
        self.client = client

    async def search(self, query: str) -> List[Dict]:
        """
        Search the catalog and normalize a small subset for the frontend

        An empty query returns no results without calling the catalog.
        """
        if not query:
            return []

        results = await self.client.search(query)
        logger.info(f"Catalog search '{query}' returned {len(results)} results")
        return [self._format_track(track) for track in results]

    def stream_url(self, track_id: str) -> str:
        return self.client.stream_url(track_id)

    def _format_track(self, track: Dict) -> Dict:
        user = track.get("user") or {}
        artwork = track.get("artwork") or {}
        return {
            "id": str(track.get("id")),
            "title": track.get("title") or "",
            "artist": user.get("name") or "",
            "artwork": next((artwork[size] for size in ARTWORK_SIZES if artwork.get(size)), ""),
            "duration": track.get("duration"),
        }
