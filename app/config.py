# ============================================================================
# FILE: app/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Audius Playlist Backend"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./music_app.db"  # Change to PostgreSQL in production
    DATABASE_TIMEOUT_SECONDS: int = 10

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Audius discovery provider
    AUDIUS_API_URL: str = "https://discovery-provider.audius.co"
    AUDIUS_APP_NAME: str = "spotify_clone_demo"
    CATALOG_TIMEOUT_SECONDS: float = 15.0

    # Listening history
    HISTORY_LIMIT: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
