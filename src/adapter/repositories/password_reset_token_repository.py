from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every reset token held by an account"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def consume(self, token_hash: str, now: datetime) -> Optional[UUID]:
        """
        Delete the live token matching token_hash and return its owner.

        The DELETE repeats the match conditions, so when two transactions
        race on the same token only one of them sees rowcount == 1.
        """
        stmt = select(PasswordResetToken).where(
            PasswordResetToken.token_hash == token_hash,
            PasswordResetToken.expires_at > now,
        )
        result = await self.session.exec(stmt)
        token = result.one_or_none()
        if token is None:
            return None

        user_id = token.user_id
        stmt = delete(PasswordResetToken).where(
            PasswordResetToken.id == token.id,
            PasswordResetToken.token_hash == token_hash,
            PasswordResetToken.expires_at > now,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount != 1:
            return None
        return user_id
