"""
Change Password Use Case

Replaces the password of a signed-in account.
"""

import logging
from uuid import UUID

from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_fields, validate_password
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return

from .dtos import ChangePasswordCommand, ChangePasswordResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - Old password must verify against the stored hash
    - New password must differ from the old one
    - New password must be at least 6 characters
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self, account_id: UUID, command: ChangePasswordCommand
    ) -> Result[ChangePasswordResponse]:
        """
        Execute change password use case.

        Args:
            account_id: Signed-in account
            command: Old and new password

        Returns:
            Result with confirmation message, or Error

        Errors:
            - MISSING_FIELD: old or new password absent
            - NOT_FOUND: account no longer exists
            - INVALID_CREDENTIALS: old password is wrong
            - PASSWORD_UNCHANGED: new password equals the old one
            - WEAK_PASSWORD: new password shorter than 6 characters
        """
        validation = require_fields(
            old_password=command.old_password, password=command.password
        )
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("NOT_FOUND", "User not found, please sign up."))

            if not self.hasher.verify(command.old_password, account.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Old password is incorrect.")
                )

            if command.password == command.old_password:
                return Return.err(
                    Error(
                        "PASSWORD_UNCHANGED",
                        "The new password cannot be the same as the old password. "
                        "Please choose a different password.",
                    )
                )

            validation = validate_password(command.password)
            if validation.is_err():
                return Return.err(validation.error)

            account.password_hash = self.hasher.hash(command.password)
            account.updated_at = utcnow()
            await self.uow.accounts.update(account)
            await self.uow.commit()

        logger.info(f"Password changed for account {account_id}")
        return Return.ok(ChangePasswordResponse(message="Password change successful"))
