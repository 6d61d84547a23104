"""
Request Password Reset Use Case

Issues a reset token and emails the reset link.
"""

import logging
from typing import Optional

from src.app.services.notifier import INotifier
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_fields
from src.libs.result import Error, Result, Return

from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_EMAIL_SUBJECT = "Your Password Reset Request"

RESET_EMAIL_TEMPLATE = """
<h2>Reset your password</h2>
<a href="{reset_url}" clicktracking="off"> Click here to reset your password. </a>

<p style="color: #999;">This link expires in {minutes} minutes.
If you didn't request a reset, you can safely ignore this email.</p>
"""


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown email fails with NOT_FOUND
    - Any pending token for the account is replaced
    - Token is committed before the email is sent; a delivery failure
      leaves the token in place
    """

    def __init__(
        self,
        uow: UnitOfWork,
        reset_tokens: ResetTokenService,
        notifier: INotifier,
        frontend_url: str,
        sender: str,
    ):
        self.uow = uow
        self.reset_tokens = reset_tokens
        self.notifier = notifier
        self.frontend_url = frontend_url.rstrip("/")
        self.sender = sender

    def build_reset_url(self, raw_secret: str) -> str:
        return f"{self.frontend_url}/reset-password/{raw_secret}"

    async def execute(self, email: Optional[str]) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Email of the account to reset

        Returns:
            Result with send status, or Error

        Errors:
            - MISSING_FIELD: email absent
            - NOT_FOUND: no account with that email
            - EMAIL_DELIVERY_FAILED: notifier reported failure
        """
        validation = require_fields(email=email)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is None:
                return Return.err(Error("NOT_FOUND", "User does not exist"))

            account_id = account.id
            to_address = account.email
            raw_secret = await self.reset_tokens.issue(self.uow, account_id)
            await self.uow.commit()

        minutes = int(self.reset_tokens.lifetime.total_seconds() // 60)
        html_body = RESET_EMAIL_TEMPLATE.format(
            reset_url=self.build_reset_url(raw_secret), minutes=minutes
        )

        sent = await self.notifier.send(
            RESET_EMAIL_SUBJECT, html_body, to_address, self.sender
        )
        if not sent:
            logger.error(f"Reset email delivery failed for account {account_id}")
            return Return.err(
                Error("EMAIL_DELIVERY_FAILED", "Email not sent, please try again")
            )

        return Return.ok(
            RequestPasswordResetResponse(success=True, message="Reset Email Sent")
        )
