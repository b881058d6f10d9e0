# ============================================================================
# FILE: app/services/user_service.py
# ============================================================================
from typing import Optional, Tuple
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.errors import StorageError, Unauthenticated, ValidationError
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)

def pseudo_user_id(email: str) -> str:
    """
    Deterministic UUID-shaped id derived from an email address

    Hex of the email, first 32 characters, zero-padded for short addresses
    and grouped 8-4-4-4-12. Demo only, NOT a secure identifier.
    """
    digits = email.encode("utf-8").hex()[:32].ljust(32, "0")
    return f"{digits[:8]}-{digits[8:12]}-{digits[12:16]}-{digits[16:20]}-{digits[20:]}"

class UserService:
    """Service layer for user operations"""

    def __init__(self, db: Session):
        self.db = db

    def signup(self, email: str, username: Optional[str] = None) -> Tuple[User, bool]:
        """
        Register a user, or return the existing one for this email

        Returns (user, created).
        """
        if not email:
            raise ValidationError("email")

        user_id = pseudo_user_id(email)
        existing = self.get_user(user_id)
        if existing:
            return existing, False

        name = username or email.split("@")[0]
        try:
            user = User(
                id=user_id,
                email=email,
                username=name,
                display_name=name,
                avatar_url=None,
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"User created: {user.username}")
            return user, True
        except IntegrityError:
            # Same email signed up concurrently
            self.db.rollback()
            user = self.get_user(user_id)
            if user is None:
                raise StorageError("Failed to create user")
            return user, False
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating user: {e}")
            raise StorageError("Failed to create user") from e

    def signin(
        self,
        token: Optional[str] = None,
        user_id: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """Look a user up by token, user id or email, in that order"""
        candidate = token or user_id or (pseudo_user_id(email) if email else None)
        if not candidate:
            raise ValidationError("token", "Provide token, user_id or email")

        user = self.get_user(candidate)
        if user is None:
            raise Unauthenticated("Invalid credentials")
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by id"""
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading user {user_id}: {e}")
            raise StorageError("Failed to load user") from e
