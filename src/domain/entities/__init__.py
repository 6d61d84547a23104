"""
Account Service Domain Entities

Each entity lives in its own module.
"""

from .enums import AccountRole

from .account import Account, DEFAULT_PHOTO
from .password_reset_token import PasswordResetToken

__all__ = [
    # Enums
    "AccountRole",
    # Entities
    "Account",
    "PasswordResetToken",
    # Defaults
    "DEFAULT_PHOTO",
]
