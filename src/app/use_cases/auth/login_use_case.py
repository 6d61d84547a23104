"""
Login Use Case

Checks email and password and issues a session token.
"""

import logging
from typing import Optional

from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_token_service import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_fields
from src.libs.result import Error, Result, Return

from .dtos import AuthResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for login and session token issuance.

    Business Rules:
    - Unknown email and wrong password yield the same error
    - A hash check runs even for unknown emails to keep timing flat
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        session_tokens: SessionTokenService,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_tokens = session_tokens

    async def execute(
        self, email: Optional[str], password: Optional[str]
    ) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: Account email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error
        """
        validation = require_fields(email=email, password=password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                self.hasher.dummy_verify(password)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials."))

            if not self.hasher.verify(password, account.password_hash):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials."))

            session = self.session_tokens.mint(account.id)
            logger.info(f"Account logged in: {account.id}")

            return Return.ok(
                AuthResponse(
                    id=str(account.id),
                    name=account.name,
                    email=account.email,
                    photo=account.photo,
                    role=account.role,
                    token=session.token,
                    expires_at=session.expires_at,
                )
            )
