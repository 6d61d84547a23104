"""
Reset Password Use Case

Redeems a reset secret and sets the new password.
"""

from typing import Optional

from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_fields, validate_password
from src.libs.result import Result, Return

from .dtos import ResetPasswordResponse


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - New password must be present and at least 6 characters
    - Secret must match a live token; the token is deleted on success
    - Token deletion and password update commit together
    """

    def __init__(self, uow: UnitOfWork, reset_tokens: ResetTokenService):
        self.uow = uow
        self.reset_tokens = reset_tokens

    async def execute(
        self, raw_secret: str, password: Optional[str]
    ) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            raw_secret: Secret from the reset link
            password: New password

        Returns:
            Result with confirmation message, or Error

        Errors:
            - MISSING_FIELD / WEAK_PASSWORD: password rejected
            - INVALID_OR_EXPIRED_TOKEN: secret unknown, used or expired
            - NOT_FOUND: account behind the token is gone
        """
        validation = require_fields(password=password)
        if validation.is_err():
            return Return.err(validation.error)

        validation = validate_password(password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            consumed = await self.reset_tokens.consume(self.uow, raw_secret, password)
            if consumed.is_err():
                return Return.err(consumed.error)

            await self.uow.commit()

        return Return.ok(
            ResetPasswordResponse(message="Password Reset Successful, Please Login")
        )
