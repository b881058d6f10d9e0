# ============================================================================
# FILE: app/api/v1/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, Response, status
from app.api.dependencies import require_current_user, get_user_service
from app.schemas.user import SignupRequest, SigninRequest, AuthResponse, MeResponse
from app.services.user_service import UserService
from app.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/auth/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    response: Response,
    users: UserService = Depends(get_user_service)
):
    """
    Register a new user account
    Returns the existing account (200) when the email is already known
    """
    user, created = users.signup(payload.email, payload.username)
    if not created:
        response.status_code = status.HTTP_200_OK
    return {"token": user.id, "user": user}

@router.post("/auth/signin", response_model=AuthResponse)
def signin(
    payload: SigninRequest,
    users: UserService = Depends(get_user_service)
):
    """
    Sign in with token, user_id or email
    Returns the pseudo-token (NOT production auth)
    """
    user = users.signin(payload.token, payload.user_id, payload.email)
    return {"token": user.id, "user": user}

@router.post("/auth/signout")
def signout(current_user: User = Depends(require_current_user)):
    """Signout clears the client-side token; the server is stateless"""
    return {"ok": True}

@router.get("/me", response_model=MeResponse)
def get_current_user_info(current_user: User = Depends(require_current_user)):
    """
    Get current user information
    Requires authentication
    """
    return {"user": current_user}
