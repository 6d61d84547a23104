from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends, Request, status

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.notifier import INotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.session_token_service import SessionTokenService
from src.libs.result import Error

# Collaborators are built once by create_app and kept on app.state


def get_config(request: Request):
    return request.app.state.config


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_session_tokens(request: Request) -> SessionTokenService:
    return request.app.state.session_tokens


def get_reset_tokens(request: Request) -> ResetTokenService:
    return request.app.state.reset_tokens


def get_notifier(request: Request) -> INotifier:
    return request.app.state.notifier


async def get_current_account_id(
    token: Optional[str] = Cookie(default=None),
    session_tokens: SessionTokenService = Depends(get_session_tokens),
) -> UUID:
    """
    Dependency to verify the session cookie.

    Returns:
        Account UUID embedded in the token

    Raises:
        ClientError: 401 if the cookie is missing, forged or expired
    """
    account_id = session_tokens.verify(token)

    if account_id is None:
        raise ClientError(
            Error("NOT_AUTHORIZED", "Not authorized, please login"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return account_id
