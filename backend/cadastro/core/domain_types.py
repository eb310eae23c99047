"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the database-assigned integer — never constructed from request data
    - NewUser is immutable: validation reads it, never rewrites it
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Supported languages for user-facing messages."""
    PT_BR = "pt-BR"
    EN = "en"


class UserValidationFailure(str, Enum):
    """Reasons a registration payload is rejected, in check order."""
    REQUIRED_FIELDS = "REQUIRED_FIELDS"
    NAME_TOO_SHORT = "NAME_TOO_SHORT"
    INVALID_EMAIL = "INVALID_EMAIL"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"


# ─── Values ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewUser:
    """Registration payload before persistence. Fields may be missing."""
    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class CreateUserResult:
    """Outcome of UserService.create_user — exactly one field is set."""
    user_id: UserId | None = None
    failure: UserValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
