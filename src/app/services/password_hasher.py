"""
Password Hasher

One-way salted hashing of account passwords with bcrypt.
"""

import base64
import hashlib
import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Hashes and verifies passwords.

    bcrypt embeds a random salt and the cost factor in each hash, so two
    hashes of the same password differ and verification needs only the
    stored digest. checkpw compares in constant time.

    Passwords longer than 72 bytes are reduced to the base64 of their
    SHA-256 digest before bcrypt sees them. Shorter passwords are passed
    through unchanged, so existing hashes keep verifying.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Reference hash for dummy_verify, computed once with the live cost factor
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds)).decode("utf-8")

    @staticmethod
    def _prepare(plaintext: str) -> bytes:
        secret = plaintext.encode("utf-8")
        if len(secret) > BCRYPT_MAX_BYTES:
            secret = base64.b64encode(hashlib.sha256(secret).digest())
        return secret

    def hash(self, plaintext: str) -> str:
        password_hash = bcrypt.hashpw(self._prepare(plaintext), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check plaintext against a stored bcrypt digest.

        Malformed digests fail closed: the result is False, never an exception.
        """
        try:
            return bcrypt.checkpw(self._prepare(plaintext), digest.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            logger.warning("Password verification against malformed hash")
            return False

    def dummy_verify(self, plaintext: str) -> None:
        """Spend one verification so unknown accounts cost the same as wrong passwords"""
        self.verify(plaintext, self._dummy_hash)
