# ============================================================================
# FILE: app/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.v1.endpoints import auth, playlist, history, music

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(playlist.router, prefix="/playlists", tags=["playlists"])
api_router.include_router(history.router, tags=["history"])
api_router.include_router(music.router, tags=["music"])
