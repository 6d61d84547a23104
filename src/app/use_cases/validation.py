"""
Input checks shared by account use cases.

Presence and password length are business rules here, not HTTP schema
rules, so they surface as MISSING_FIELD / WEAK_PASSWORD errors.
"""

from typing import Optional

from src.libs.result import Error, Result, Return

MIN_PASSWORD_LENGTH = 6


def require_fields(**fields: Optional[str]) -> Result[None]:
    """Fail with MISSING_FIELD on the first absent or empty field"""
    for name, value in fields.items():
        if value is None or value == "":
            return Return.err(Error("MISSING_FIELD", f"Please provide {name}."))
    return Return.ok(None)


def validate_password(password: str) -> Result[None]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                "WEAK_PASSWORD",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters.",
            )
        )
    return Return.ok(None)
