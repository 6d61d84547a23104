from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import ProfileResponse


class GetProfileUseCase:
    """Use case for reading the signed-in account's profile."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("NOT_FOUND", "User not found."))

            return Return.ok(ProfileResponse.from_account(account))
