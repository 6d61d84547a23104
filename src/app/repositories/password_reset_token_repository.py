from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every reset token held by an account, returning the count"""
        pass

    @abstractmethod
    async def consume(self, token_hash: str, now: datetime) -> Optional[UUID]:
        """
        Atomically delete the live token matching token_hash.

        Returns the owning account id, or None when no unexpired token
        matches or a concurrent caller deleted it first.
        """
        pass
