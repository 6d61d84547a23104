"""
PasswordResetToken Entity

Pending password reset requests.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - one pending reset per account.

    Business Rules:
    - Expires 30 minutes after creation, checked lazily on lookup
    - token_hash is the SHA-256 digest of the secret sent by email
    - Single-use: the row is deleted when the reset succeeds
    - A new request replaces any existing row for the account
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="accounts.id", unique=True)
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_expires_at", "expires_at"),
    )
