from uuid import uuid4

import pytest

from src.app.repositories.account_repository import DuplicateEmailError
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.domain.entities import DEFAULT_PHOTO, Account


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, hasher, session_tokens):
    """Creates the account with a hashed password and returns a session token"""
    # Arrange
    use_case = RegisterUseCase(mock_uow, hasher, session_tokens)
    command = RegisterCommand(name="A", email="a@x.com", password="secret1")

    # Act
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.name == "A"
    assert data.email == "a@x.com"
    assert data.photo == DEFAULT_PHOTO
    assert data.role == "subscriber"
    assert session_tokens.verify(data.token) is not None
    assert str(session_tokens.verify(data.token)) == data.id

    created = mock_uow.accounts.create.call_args.args[0]
    assert created.password_hash != "secret1"
    assert hasher.verify("secret1", created.password_hash)

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"email": "a@x.com", "password": "secret1"},
        {"name": "A", "password": "secret1"},
        {"name": "A", "email": "a@x.com"},
        {"name": "", "email": "a@x.com", "password": "secret1"},
    ],
)
async def test_missing_field(mock_uow, hasher, session_tokens, fields):
    use_case = RegisterUseCase(mock_uow, hasher, session_tokens)

    result = await use_case.execute(RegisterCommand(**fields))

    assert result.is_err()
    assert result.error.code == "MISSING_FIELD"
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_weak_password(mock_uow, hasher, session_tokens):
    use_case = RegisterUseCase(mock_uow, hasher, session_tokens)

    result = await use_case.execute(
        RegisterCommand(name="A", email="a@x.com", password="12345")
    )

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_email(mock_uow, hasher, session_tokens):
    """Existing email fails and no account is created"""
    mock_uow.accounts.get_by_email.return_value = Account(
        id=uuid4(), name="B", email="a@x.com", password_hash="x"
    )
    use_case = RegisterUseCase(mock_uow, hasher, session_tokens)

    result = await use_case.execute(
        RegisterCommand(name="A", email="a@x.com", password="secret1")
    )

    assert result.is_err()
    assert result.error.code == "DUPLICATE_EMAIL"
    mock_uow.accounts.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_email_from_unique_constraint(mock_uow, hasher, session_tokens):
    """A concurrent registration that wins the insert still yields DUPLICATE_EMAIL"""
    mock_uow.accounts.create.side_effect = DuplicateEmailError("a@x.com")
    use_case = RegisterUseCase(mock_uow, hasher, session_tokens)

    result = await use_case.execute(
        RegisterCommand(name="A", email="a@x.com", password="secret1")
    )

    assert result.is_err()
    assert result.error.code == "DUPLICATE_EMAIL"
    mock_uow.commit.assert_not_called()
