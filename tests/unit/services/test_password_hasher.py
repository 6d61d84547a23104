import pytest

from src.app.services.password_hasher import PasswordHasher


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


def test_verify_accepts_original_password(hasher):
    digest = hasher.hash("secret1")

    assert hasher.verify("secret1", digest) is True


def test_verify_rejects_other_password(hasher):
    digest = hasher.hash("secret1")

    assert hasher.verify("secret2", digest) is False


def test_hash_is_salted_and_never_plaintext(hasher):
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert first.startswith("$2")


def test_hash_embeds_cost_factor():
    digest = PasswordHasher(rounds=5).hash("secret1")

    assert digest.split("$")[2] == "05"


@pytest.mark.parametrize("digest", ["", "not-a-bcrypt-hash", "$2b$04$short", None])
def test_verify_fails_closed_on_malformed_digest(hasher, digest):
    assert hasher.verify("secret1", digest) is False


def test_dummy_verify_returns_nothing(hasher):
    assert hasher.dummy_verify("anything") is None


def test_long_password_hashes_and_verifies(hasher):
    password = "p" * 80
    digest = hasher.hash(password)

    assert hasher.verify(password, digest) is True


def test_long_passwords_differing_past_72_bytes_are_distinct(hasher):
    shared = "p" * 72
    digest = hasher.hash(shared + "first")

    assert hasher.verify(shared + "second", digest) is False
    assert hasher.verify(shared, digest) is False


def test_multibyte_password_over_72_bytes(hasher):
    # 40 characters, 80 bytes in UTF-8
    password = "é" * 40
    digest = hasher.hash(password)

    assert hasher.verify(password, digest) is True
    assert hasher.verify("é" * 39, digest) is False
