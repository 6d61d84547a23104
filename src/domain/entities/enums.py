"""
Account Service Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Default role given to new accounts. Roles are stored as data only, never enforced."""

    subscriber = "subscriber"
