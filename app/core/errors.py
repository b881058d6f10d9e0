# ============================================================================
# FILE: app/core/errors.py
# Error taxonomy shared by services and the HTTP layer
# ============================================================================
from typing import Optional


class AppError(Exception):
    """Base class for errors that map to a client-facing response"""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Required input is missing or malformed. Carries the offending field."""

    status_code = 400

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{field} is required")
        self.field = field


class NotFound(AppError):
    """Resource is absent, or exists but is not owned by the caller."""

    status_code = 404

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class Unauthenticated(AppError):
    """No credential, or the credential does not map to a user."""

    status_code = 401

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class StorageError(AppError):
    """Backing store unreachable or rejected the operation."""

    status_code = 503

    def __init__(self, message: str = "Storage unavailable") -> None:
        super().__init__(message)


class CatalogError(AppError):
    """External catalog request failed."""

    status_code = 502
