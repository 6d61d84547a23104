"""
Account Entity

Represents a registered user of the service.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import AccountRole

DEFAULT_PHOTO = "https://i.ibb.co/4pDNDk1/avatar.png"


class Account(SQLModel, table=True):
    """
    Account entity - a registered user.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash, never plaintext
    - Email is fixed after registration
    - Role is a single stored field with no permission semantics
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    photo: str = Field(default=DEFAULT_PHOTO, max_length=1024)
    role: str = Field(default=AccountRole.subscriber.value, max_length=32)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
