# ============================================================================
# FILE: app/services/history_service.py
# ============================================================================
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.config import settings
from app.core.errors import StorageError, ValidationError
from app.db.base import utcnow
from app.db.models.history import PlayEvent
from app.services.track_registry import TrackRegistry
import logging

logger = logging.getLogger(__name__)

# Recently-played is never longer than this, whatever the configuration says
MAX_HISTORY = 50

class HistoryService:
    """Append-only listening history for the authenticated user"""

    def __init__(self, db: Session, track_registry: TrackRegistry, limit: Optional[int] = None):
        self.db = db
        self.track_registry = track_registry
        configured = settings.HISTORY_LIMIT if limit is None else limit
        self.limit = max(0, min(configured, MAX_HISTORY))

    def record_play(
        self,
        principal_id: str,
        external_track_id: Optional[str],
        title: Optional[str] = None,
        artist: Optional[str] = None,
        seconds_listened: Optional[int] = None,
    ) -> PlayEvent:
        """Resolve the track and append a play event stamped with the current time"""
        if not external_track_id:
            raise ValidationError("audius_track_id")
        if seconds_listened is not None and seconds_listened < 0:
            raise ValidationError("seconds_listened", "seconds_listened must not be negative")

        track = self.track_registry.resolve(external_track_id, title, artist)

        try:
            event = PlayEvent(
                user_id=principal_id,
                track_id=track.id,
                listened_at=utcnow(),
                seconds_listened=seconds_listened,
            )
            self.db.add(event)
            self.db.commit()
            self.db.refresh(event)
            logger.info(f"Playback tracked for user {principal_id}: {external_track_id}")
            return event
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error tracking playback: {e}")
            raise StorageError("Failed to record play") from e

    def list_plays(self, principal_id: str) -> List[Dict[str, Any]]:
        """Most recent plays first, never more than the configured limit"""
        try:
            events = (
                self.db.query(PlayEvent)
                .filter(PlayEvent.user_id == principal_id)
                .order_by(PlayEvent.listened_at.desc(), PlayEvent.id.desc())
                .limit(self.limit)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error listing plays for {principal_id}: {e}")
            raise StorageError("Failed to list plays") from e

        return [
            {
                "id": event.id,
                "listened_at": event.listened_at,
                "seconds_listened": event.seconds_listened,
                "track": {
                    "id": event.track.id,
                    "title": event.track.title,
                    "artist_name": event.track.artist_name,
                    "external_id": event.track.external_id,
                },
            }
            for event in events
        ]

    def summary(self, principal_id: str) -> Dict[str, int]:
        """Total number of plays, computed by the store"""
        try:
            total = (
                self.db.query(func.count(PlayEvent.id))
                .filter(PlayEvent.user_id == principal_id)
                .scalar()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error summarising plays for {principal_id}: {e}")
            raise StorageError("Failed to summarise plays") from e
        return {"total_plays": total or 0}
