"""
User Use Case DTOs (Data Transfer Objects)

Command and Response classes for the profile domain.
"""

from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Account


class UpdateProfileCommand(BaseModel):
    """Partial profile update; absent or empty fields keep their value"""

    name: Optional[str] = None
    photo: Optional[str] = None
    role: Optional[str] = None


class ChangePasswordCommand(BaseModel):
    old_password: Optional[str] = None
    password: Optional[str] = None


class ProfileResponse(BaseModel):
    """Public account fields"""

    id: str
    name: str
    email: str
    photo: str
    role: str

    @classmethod
    def from_account(cls, account: Account) -> "ProfileResponse":
        return cls(
            id=str(account.id),
            name=account.name,
            email=account.email,
            photo=account.photo,
            role=account.role,
        )


class ChangePasswordResponse(BaseModel):
    message: str
