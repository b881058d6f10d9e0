# ============================================================================
# FILE: app/services/identity.py
# ============================================================================
from typing import Optional, Protocol
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import StorageError, Unauthenticated
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)

class IdentityResolver(Protocol):
    """Maps an opaque bearer credential to a user, or raises Unauthenticated"""

    def resolve(self, credential: Optional[str]) -> User:
        ...

class PseudoTokenResolver:
    """
    Placeholder scheme: the bearer token is the user's id

    NOT suitable for production. Swap in a resolver that verifies signed
    tokens without touching the services.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, credential: Optional[str]) -> User:
        if not credential:
            raise Unauthenticated("Missing bearer token")
        try:
            user = self.db.get(User, credential)
        except SQLAlchemyError as e:
            logger.error(f"Identity lookup failed: {e}")
            raise StorageError("Identity lookup failed") from e
        if user is None:
            raise Unauthenticated()
        return user
