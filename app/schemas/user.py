# ============================================================================
# FILE: app/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class SignupRequest(BaseModel):
    """Schema for user registration"""
    email: EmailStr
    username: Optional[str] = None

class SigninRequest(BaseModel):
    """Schema for user login; any one of the three fields is enough"""
    token: Optional[str] = None
    user_id: Optional[str] = None
    email: Optional[str] = None

class UserResponse(BaseModel):
    """Schema for user response"""
    id: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    """Pseudo-token plus the profile it belongs to"""
    token: str
    user: UserResponse

class MeResponse(BaseModel):
    user: UserResponse
