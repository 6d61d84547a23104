"""
Update Profile Use Case

Merges submitted profile fields over the stored account.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.libs.result import Error, Result, Return

from .dtos import ProfileResponse, UpdateProfileCommand

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Use case for partial profile updates.

    Business Rules:
    - name, photo and role are updatable; absent or empty values keep
      the stored value
    - email is never changed here
    - role is stored as given, no permission checks apply
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        """
        Execute update profile use case.

        Args:
            account_id: Signed-in account
            command: Fields to merge

        Returns:
            Result with the updated profile, or Error(NOT_FOUND)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            account.name = command.name or account.name
            account.photo = command.photo or account.photo
            account.role = command.role or account.role
            account.updated_at = utcnow()

            account = await self.uow.accounts.update(account)
            await self.uow.commit()

            logger.info(f"Profile updated for account {account_id}")
            return Return.ok(ProfileResponse.from_account(account))
