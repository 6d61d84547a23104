"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, password reset
- users/: Profile and password of the signed-in account
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from .users import (
    GetProfileUseCase,
    UpdateProfileUseCase,
    ChangePasswordUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
]
