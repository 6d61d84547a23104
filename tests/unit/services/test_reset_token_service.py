"""
Unit tests for ResetTokenService

Repository calls are mocked; the atomic delete itself is covered by the
integration tests.
"""
import hashlib
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.services.reset_token_service import ResetTokenService
from src.domain.entities import Account

NOW = datetime(2030, 1, 1, 12, 0)


@pytest.fixture
def reset_tokens(hasher):
    return ResetTokenService(hasher, clock=lambda: NOW)


def test_digest_is_sha256_hex():
    digest = ResetTokenService.digest("raw-secret")

    assert digest == hashlib.sha256(b"raw-secret").hexdigest()
    assert len(digest) == 64


@pytest.mark.asyncio
async def test_issue_stores_digest_not_secret(mock_uow, reset_tokens):
    account_id = uuid4()

    raw_secret = await reset_tokens.issue(mock_uow, account_id)

    stored = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert stored.user_id == account_id
    assert stored.token_hash == hashlib.sha256(raw_secret.encode()).hexdigest()
    assert stored.token_hash != raw_secret
    assert stored.created_at == NOW
    assert stored.expires_at == NOW + timedelta(minutes=30)


@pytest.mark.asyncio
async def test_issue_secret_has_32_random_bytes_plus_account_id(mock_uow, reset_tokens):
    account_id = uuid4()

    raw_secret = await reset_tokens.issue(mock_uow, account_id)

    assert raw_secret.endswith(str(account_id))
    random_part = raw_secret[: -len(str(account_id))]
    assert len(bytes.fromhex(random_part)) == 32


@pytest.mark.asyncio
async def test_issue_generates_distinct_secrets(mock_uow, reset_tokens):
    account_id = uuid4()

    first = await reset_tokens.issue(mock_uow, account_id)
    second = await reset_tokens.issue(mock_uow, account_id)

    assert first != second


@pytest.mark.asyncio
async def test_issue_replaces_existing_token_first(mock_uow, reset_tokens):
    account_id = uuid4()
    calls = []
    mock_uow.password_reset_tokens.delete_by_user_id.side_effect = (
        lambda user_id: calls.append("delete") or 1
    )
    mock_uow.password_reset_tokens.create.side_effect = (
        lambda token: calls.append("create") or token
    )

    await reset_tokens.issue(mock_uow, account_id)

    mock_uow.password_reset_tokens.delete_by_user_id.assert_called_once_with(account_id)
    assert calls == ["delete", "create"]


@pytest.mark.asyncio
async def test_issue_honours_configured_lifetime(mock_uow, hasher):
    service = ResetTokenService(hasher, lifetime=timedelta(minutes=5), clock=lambda: NOW)

    await service.issue(mock_uow, uuid4())

    stored = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert stored.expires_at == NOW + timedelta(minutes=5)


@pytest.mark.asyncio
async def test_consume_updates_password_of_token_owner(mock_uow, reset_tokens, hasher):
    account = Account(
        id=uuid4(),
        name="A",
        email="a@x.com",
        password_hash=hasher.hash("secret1"),
    )
    mock_uow.password_reset_tokens.consume.return_value = account.id
    mock_uow.accounts.get_by_id.return_value = account

    result = await reset_tokens.consume(mock_uow, "raw-secret", "secret2")

    assert result.is_ok()
    assert result.value == account.id
    mock_uow.password_reset_tokens.consume.assert_called_once_with(
        hashlib.sha256(b"raw-secret").hexdigest(), NOW
    )
    updated = mock_uow.accounts.update.call_args.args[0]
    assert hasher.verify("secret2", updated.password_hash)
    assert not hasher.verify("secret1", updated.password_hash)


@pytest.mark.asyncio
async def test_consume_without_match_changes_nothing(mock_uow, reset_tokens):
    mock_uow.password_reset_tokens.consume.return_value = None

    result = await reset_tokens.consume(mock_uow, "unknown", "secret2")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    mock_uow.accounts.get_by_id.assert_not_called()
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_consume_with_missing_account(mock_uow, reset_tokens):
    mock_uow.password_reset_tokens.consume.return_value = uuid4()
    mock_uow.accounts.get_by_id.return_value = None

    result = await reset_tokens.consume(mock_uow, "raw-secret", "secret2")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    mock_uow.accounts.update.assert_not_called()
