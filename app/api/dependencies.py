# ============================================================================
# FILE: app/api/dependencies.py
# ============================================================================
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.db.models.user import User
from app.core.audius_client import audius_client
from app.services.identity import IdentityResolver, PseudoTokenResolver
from app.services.track_registry import TrackRegistry
from app.services.playlist_service import PlaylistService
from app.services.history_service import HistoryService
from app.services.music_service import MusicService
from app.services.user_service import UserService
from typing import Optional

bearer_scheme = HTTPBearer(auto_error=False)

def get_identity_resolver(db: Session = Depends(get_db)) -> IdentityResolver:
    """Override this dependency to plug in real token verification"""
    return PseudoTokenResolver(db)

def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None

def get_stream_token(
    header_token: Optional[str] = Depends(get_bearer_token),
    token: Optional[str] = Query(None, description="Bearer token for media elements that cannot set headers"),
) -> Optional[str]:
    """Prefer the Authorization header, fall back to ?token="""
    return header_token or token

def require_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> User:
    """
    Require authenticated user (raises Unauthenticated -> 401)
    Use this dependency for protected endpoints
    """
    return resolver.resolve(token)

def require_stream_user(
    token: Optional[str] = Depends(get_stream_token),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> User:
    return resolver.resolve(token)

def get_track_registry(db: Session = Depends(get_db)) -> TrackRegistry:
    return TrackRegistry(db)

def get_playlist_service(
    db: Session = Depends(get_db),
    track_registry: TrackRegistry = Depends(get_track_registry),
) -> PlaylistService:
    return PlaylistService(db, track_registry)

def get_history_service(
    db: Session = Depends(get_db),
    track_registry: TrackRegistry = Depends(get_track_registry),
) -> HistoryService:
    return HistoryService(db, track_registry)

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)

def get_music_service() -> MusicService:
    return MusicService(audius_client)
