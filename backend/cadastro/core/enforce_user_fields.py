"""User Field Enforcement — registration rules checked before any write.

Invariants:
    - check_new_user is PURE: returns the first failure or None, never raises, never mutates
    - Rules run in a fixed order; the first failing rule short-circuits
    - No normalization: whitespace and case are taken exactly as received

Design Decisions:
    - Result value over exceptions: a rejected payload is an expected outcome,
      not an error condition (the shell decides how to surface it)
    - EMAIL_PATTERN matched with fullmatch: "$" would accept a trailing newline
"""

import re

from cadastro.core.domain_types import NewUser, UserValidationFailure


MIN_NAME_LENGTH: int = 3
MIN_PASSWORD_LENGTH: int = 6
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def check_new_user(user: NewUser) -> UserValidationFailure | None:
    """Apply all registration rules in order. Pure — no state mutation."""
    if not user.name or not user.email or not user.password:
        return UserValidationFailure.REQUIRED_FIELDS

    if len(user.name) < MIN_NAME_LENGTH:
        return UserValidationFailure.NAME_TOO_SHORT

    if not is_valid_email(user.email):
        return UserValidationFailure.INVALID_EMAIL

    if len(user.password) < MIN_PASSWORD_LENGTH:
        return UserValidationFailure.PASSWORD_TOO_SHORT

    return None


def is_valid_email(email: str) -> bool:
    """local@domain.tld shape: no spaces, exactly one @, a dot after it."""
    return EMAIL_PATTERN.fullmatch(email) is not None
