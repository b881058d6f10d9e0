# ============================================================================
# FILE: app/core/audius_client.py
# Audius discovery provider client for catalog search and stream URLs
# ============================================================================
import httpx
from typing import Dict, List, Optional
from urllib.parse import quote
from app.config import settings
from app.core.errors import CatalogError
import logging

logger = logging.getLogger(__name__)


class AudiusClient:
    """
    Thin wrapper around the public Audius discovery API

    Only builds URLs and decodes responses; no caching or paging.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        app_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.AUDIUS_API_URL).rstrip("/")
        self.app_name = app_name or settings.AUDIUS_APP_NAME
        self.timeout = timeout or settings.CATALOG_TIMEOUT_SECONDS

    async def search(self, query: str) -> List[Dict]:
        """
        Search tracks by free text

        Returns the raw track dicts from the `data` field.
        """
        url = f"{self.base_url}/v1/tracks/search"
        params = {"query": query, "app_name": self.app_name}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Audius search request failed: {e}")
            raise CatalogError("Audius search failed") from e

        if not response.is_success:
            logger.error(f"Audius search failed: {response.status_code}")
            raise CatalogError("Audius search failed")

        payload = response.json() or {}
        return payload.get("data") or []

    def stream_url(self, track_id: str) -> str:
        """URL the browser can stream from directly"""
        return f"{self.base_url}/v1/tracks/{quote(track_id, safe='')}/stream?app_name={quote(self.app_name)}"


# Singleton instance
audius_client = AudiusClient()
