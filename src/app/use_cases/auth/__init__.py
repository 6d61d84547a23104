"""
Authentication Use Cases

Registration, login and the password reset flow.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    RegisterCommand,
    AuthResponse,
    RequestPasswordResetResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "RequestPasswordResetResponse",
    "ResetPasswordResponse",
]
