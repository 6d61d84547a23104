"""
User Profile Use Cases

Business logic for the signed-in account.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import (
    UpdateProfileCommand,
    ChangePasswordCommand,
    ProfileResponse,
    ChangePasswordResponse,
)

__all__ = [
    # Use Cases
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    # DTOs - Commands
    "UpdateProfileCommand",
    "ChangePasswordCommand",
    # DTOs - Responses
    "ProfileResponse",
    "ChangePasswordResponse",
]
