"""
Session Cookie Helpers

The session token travels in an HttpOnly cookie named ``token``. Logout
only overwrites the cookie; the token itself stays valid until it expires.
"""

from datetime import UTC, datetime

from fastapi import Response

SESSION_COOKIE_NAME = "token"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _samesite(secure: bool) -> str:
    # Browsers reject SameSite=None without Secure
    return "none" if secure else "lax"


def set_session_cookie(
    response: Response, token: str, expires_at: datetime, secure: bool = True
) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        path="/",
        httponly=True,
        expires=expires_at,
        samesite=_samesite(secure),
        secure=secure,
    )


def clear_session_cookie(response: Response, secure: bool = True) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        "",
        path="/",
        httponly=True,
        max_age=0,
        expires=_EPOCH,
        samesite=_samesite(secure),
        secure=secure,
    )
