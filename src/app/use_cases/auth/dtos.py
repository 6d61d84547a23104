"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the auth domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - registration intent as received

    Fields are optional so that presence is checked by the use case.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AuthResponse(BaseModel):
    """Public profile plus session token, returned by register and login"""

    id: str
    name: str
    email: str
    photo: str
    role: str
    token: str
    # Session cookie expiry
    expires_at: datetime


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    success: bool
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    message: str
