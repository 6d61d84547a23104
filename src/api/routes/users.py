from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Cookie, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.cookies import clear_session_cookie, set_session_cookie
from src.app.services.notifier import INotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_service import ResetTokenService
from src.app.services.session_token_service import SessionTokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
)
from src.app.use_cases.users import (
    ChangePasswordCommand,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import (
    get_config,
    get_current_account_id,
    get_notifier,
    get_password_hasher,
    get_reset_tokens,
    get_session_tokens,
    get_unit_of_work,
)

router = APIRouter(prefix="/users", tags=["Users"])


# Request payloads leave every field optional: presence is a business
# rule reported as MISSING_FIELD, not a 422 from request validation.


class RegisterRequest(BaseModel):
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Account email address")
    password: Optional[str] = Field(None, description="Password (min 6 chars)")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, description="Account email address")
    password: Optional[str] = Field(None, description="Account password")


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = None
    photo: Optional[str] = None
    role: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    oldPassword: Optional[str] = Field(None, description="Current password")
    password: Optional[str] = Field(None, description="New password (min 6 chars)")


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = Field(None, description="Account email address")


class ResetPasswordRequest(BaseModel):
    password: Optional[str] = Field(None, description="New password (min 6 chars)")


class AccountTokenResponse(BaseModel):
    """Profile and session token, also delivered as the token cookie"""

    id: str
    name: str
    email: str
    photo: str
    role: str
    token: str


class MessageResponse(BaseModel):
    message: str


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AccountTokenResponse
)
async def register(
    request: RegisterRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    session_tokens: SessionTokenService = Depends(get_session_tokens),
    config=Depends(get_config),
):
    """
    Register a new account and sign it in.

    Raises:
        - 400 Bad Request: MISSING_FIELD, WEAK_PASSWORD, DUPLICATE_EMAIL
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher, session_tokens)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    account = result.value
    set_session_cookie(
        response, account.token, account.expires_at, secure=config.COOKIE_SECURE
    )
    return account


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AccountTokenResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    session_tokens: SessionTokenService = Depends(get_session_tokens),
    config=Depends(get_config),
):
    """
    Authenticate and set the session cookie.

    Raises:
        - 400 Bad Request: MISSING_FIELD, INVALID_CREDENTIALS
    """
    use_case = LoginUseCase(uow, hasher, session_tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    account = result.value
    set_session_cookie(
        response, account.token, account.expires_at, secure=config.COOKIE_SECURE
    )
    return account


@router.get("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(response: Response, config=Depends(get_config)):
    """
    Clear the session cookie.

    The token is not revoked server-side and remains valid until it expires.
    """
    clear_session_cookie(response, secure=config.COOKIE_SECURE)
    return MessageResponse(message="Successfully Logged Out")


@router.get("/getuser", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_user(
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile of the signed-in account.

    Raises:
        - 401 Unauthorized: Missing or invalid session cookie
        - 404 Not Found: Account no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/loggedin", status_code=status.HTTP_200_OK, response_model=bool)
async def login_status(
    token: Optional[str] = Cookie(default=None),
    session_tokens: SessionTokenService = Depends(get_session_tokens),
):
    """True when the session cookie carries a valid, unexpired token"""
    return session_tokens.verify(token) is not None


@router.patch("/updateuser", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_user(
    request: UpdateProfileRequest,
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update name, photo and role. Email cannot be changed.

    Raises:
        - 401 Unauthorized: Missing or invalid session cookie
        - 404 Not Found: Account no longer exists
    """
    command = UpdateProfileCommand(
        name=request.name, photo=request.photo, role=request.role
    )

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(account_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/changepassword", status_code=status.HTTP_200_OK, response_model=ChangePasswordResponse
)
async def change_password(
    request: ChangePasswordRequest,
    account_id: UUID = Depends(get_current_account_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change the password of the signed-in account.

    Raises:
        - 400 Bad Request: MISSING_FIELD, INVALID_CREDENTIALS,
          PASSWORD_UNCHANGED, WEAK_PASSWORD
        - 401 Unauthorized: Missing or invalid session cookie
        - 404 Not Found: Account no longer exists
    """
    command = ChangePasswordCommand(
        old_password=request.oldPassword, password=request.password
    )

    use_case = ChangePasswordUseCase(uow, hasher)
    result = await use_case.execute(account_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/forgotpassword",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_tokens: ResetTokenService = Depends(get_reset_tokens),
    notifier: INotifier = Depends(get_notifier),
    config=Depends(get_config),
):
    """
    Email a password reset link.

    Raises:
        - 400 Bad Request: MISSING_FIELD
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: EMAIL_DELIVERY_FAILED (token stays stored)
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        reset_tokens,
        notifier,
        frontend_url=config.FRONTEND_URL,
        sender=config.EMAIL_USER,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/resetpassword/{reset_token}",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    reset_token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    reset_tokens: ResetTokenService = Depends(get_reset_tokens),
):
    """
    Set a new password using the secret from the reset link.

    Raises:
        - 400 Bad Request: MISSING_FIELD, WEAK_PASSWORD
        - 404 Not Found: INVALID_OR_EXPIRED_TOKEN
    """
    use_case = ResetPasswordUseCase(uow, reset_tokens)
    result = await use_case.execute(reset_token, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
