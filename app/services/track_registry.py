# ============================================================================
# FILE: app/services/track_registry.py
# ============================================================================
from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import StorageError
from app.db.models.track import Track, UNKNOWN_TITLE
import logging

logger = logging.getLogger(__name__)

class TrackRegistry:
    """
    Resolves external catalog ids to canonical local Track rows

    The unique constraint on tracks.external_id decides concurrent inserts:
    the losing writer rolls back and re-reads the winner's row.
    """

    def __init__(self, db: Session):
        self.db = db

    def find(self, external_id: str) -> Optional[Track]:
        """Look up a track by its catalog id without creating it"""
        try:
            return self._find_by_external_id(external_id)
        except SQLAlchemyError as e:
            logger.error(f"Track lookup failed for {external_id}: {e}")
            raise StorageError("Track lookup failed") from e

    def resolve(self, external_id: str, title: Optional[str] = None, artist: Optional[str] = None) -> Track:
        """
        Return the track for external_id, creating it from the fallback
        metadata when it does not exist yet

        Existing rows are returned unchanged; title and artist only apply to
        a brand new row.
        """
        track = self.find(external_id)
        if track:
            return track

        try:
            track = Track(
                external_id=external_id,
                title=title or UNKNOWN_TITLE,
                artist_name=artist or "",
            )
            self.db.add(track)
            self.db.commit()
            self.db.refresh(track)
            logger.info(f"Track registered: {track.id} for external id {external_id}")
            return track
        except IntegrityError:
            # Another request inserted the same external id first
            self.db.rollback()
            logger.info(f"Concurrent insert for external id {external_id}, re-reading")
            winner = self.find(external_id)
            if winner is None:
                raise StorageError("Track insert conflicted but no row was found")
            return winner
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error registering track {external_id}: {e}")
            raise StorageError("Track insert failed") from e

    def _find_by_external_id(self, external_id: str) -> Optional[Track]:
        return self.db.query(Track).filter(Track.external_id == external_id).first()
