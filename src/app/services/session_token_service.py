"""
Session Token Service

Stateless session credentials: HS256 JWTs carrying the account id and an
absolute expiry. Nothing is stored server-side, so a token stays valid
until it expires, logout included.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional
from uuid import UUID

from jose import JWTError, jwt


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class SessionToken:
    """A minted credential and the moment it stops being accepted"""

    token: str
    expires_at: datetime


class SessionTokenService:
    """
    Mints and verifies session tokens.

    The signing secret is handed in once at startup and never changes for
    the lifetime of the process.
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = timedelta(days=1),
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _now,
    ):
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm
        self._clock = clock

    def mint(self, account_id: UUID) -> SessionToken:
        """
        Create a signed token for an account.

        Args:
            account_id: Account UUID

        Returns:
            SessionToken with the JWT string and its timezone-aware expiry
        """
        now = self._clock()
        expires_at = now + self.lifetime
        payload = {
            "id": str(account_id),
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        return SessionToken(token=token, expires_at=expires_at)

    def verify(self, token: Optional[str]) -> Optional[UUID]:
        """
        Verify signature and expiry of a token.

        Args:
            token: JWT string, possibly empty or missing

        Returns:
            Account UUID, or None if the token is absent, forged, expired or malformed
        """
        if not token:
            return None

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError:
            return None

        try:
            return UUID(payload["id"])
        except (KeyError, TypeError, ValueError, AttributeError):
            return None
