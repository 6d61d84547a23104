import logging

from src.app.repositories.account_repository import DuplicateEmailError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_token_service import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_fields, validate_password
from src.domain.entities import Account
from src.libs.result import Error, Result, Return

from .dtos import AuthResponse, RegisterCommand

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand
    - Output: Result[AuthResponse]

    Business Logic:
    1. Name, email and password must be present
    2. Password must be at least 6 characters
    3. Email must not be registered yet
    4. Hash password and create the account
    5. Commit, then mint a session token
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

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[AuthResponse] with profile and token, or Error

        Errors:
            - MISSING_FIELD: name, email or password absent
            - WEAK_PASSWORD: password shorter than 6 characters
            - DUPLICATE_EMAIL: email already registered
        """
        validation = require_fields(
            name=command.name, email=command.email, password=command.password
        )
        if validation.is_err():
            return Return.err(validation.error)

        validation = validate_password(command.password)
        if validation.is_err():
            return Return.err(validation.error)

        duplicate = Error(
            "DUPLICATE_EMAIL",
            "This email address has already been registered. Please choose a different one.",
        )

        async with self.uow:
            existing = await self.uow.accounts.get_by_email(command.email)
            if existing:
                return Return.err(duplicate)

            account = Account(
                name=command.name,
                email=command.email,
                password_hash=self.hasher.hash(command.password),
            )
            try:
                account = await self.uow.accounts.create(account)
            except DuplicateEmailError:
                # Lost a race with a concurrent registration
                return Return.err(duplicate)

            await self.uow.commit()

            logger.info(f"Account registered: {account.id}")

            session = self.session_tokens.mint(account.id)
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
