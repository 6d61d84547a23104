"""
Reset Token Service

Lifecycle of password reset tokens, per account:

    NONE --issue--> PENDING --consume--> NONE
                       |
                       +--(expires_at passes)--> EXPIRED --issue--> PENDING

Only the SHA-256 digest of a secret is stored. The raw secret leaves the
service once, through the reset email, and is never persisted or logged.
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID

from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ResetTokenService:
    """
    Issues and consumes password reset tokens.

    Both operations run inside the caller's unit of work; the caller
    commits.
    """

    SECRET_BYTES = 32

    def __init__(
        self,
        hasher: PasswordHasher,
        lifetime: timedelta = timedelta(minutes=30),
        clock: Callable[[], datetime] = utcnow,
    ):
        self._hasher = hasher
        self.lifetime = lifetime
        self._clock = clock

    @staticmethod
    def digest(raw_secret: str) -> str:
        """SHA-256 hex digest of a raw secret (64 chars)"""
        return hashlib.sha256(raw_secret.encode("utf-8")).hexdigest()

    async def issue(self, uow: UnitOfWork, account_id: UUID) -> str:
        """
        Start a reset for an account, replacing any earlier token.

        Args:
            uow: Open unit of work
            account_id: Account requesting the reset

        Returns:
            The raw secret to deliver out of band
        """
        replaced = await uow.password_reset_tokens.delete_by_user_id(account_id)
        if replaced:
            logger.info(f"Replaced pending reset token for account {account_id}")

        # Account id suffix keeps secrets unique across accounts
        raw_secret = secrets.token_hex(self.SECRET_BYTES) + str(account_id)

        now = self._clock()
        await uow.password_reset_tokens.create(
            PasswordResetToken(
                user_id=account_id,
                token_hash=self.digest(raw_secret),
                created_at=now,
                expires_at=now + self.lifetime,
            )
        )
        logger.info(f"Issued reset token for account {account_id}")
        return raw_secret

    async def consume(
        self, uow: UnitOfWork, raw_secret: str, new_password: str
    ) -> Result[UUID]:
        """
        Redeem a raw secret and set a new password.

        The token row is removed by a conditional delete, so of several
        concurrent calls with the same secret exactly one gets a match.

        Args:
            uow: Open unit of work
            raw_secret: Secret from the reset link
            new_password: Already validated plaintext password

        Returns:
            Result with the account id, or Error

        Errors:
            - INVALID_OR_EXPIRED_TOKEN: Unknown, expired or already used secret
            - NOT_FOUND: Token owner no longer exists
        """
        account_id = await uow.password_reset_tokens.consume(
            self.digest(raw_secret), self._clock()
        )
        if account_id is None:
            return Return.err(
                Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")
            )

        account = await uow.accounts.get_by_id(account_id)
        if account is None:
            return Return.err(Error("NOT_FOUND", "User not found"))

        account.password_hash = self._hasher.hash(new_password)
        account.updated_at = self._clock()
        await uow.accounts.update(account)

        logger.info(f"Password reset completed for account {account_id}")
        return Return.ok(account.id)
