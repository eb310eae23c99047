"""User Schemas — JSON contract of POST /usuarios/criar.

Invariants:
    - UserCreate fields are optional: a missing field must reach check_new_user
      and produce REQUIRED_FIELDS, not a schema error
    - Every accepted string is UTF-8 encodable: JSON may carry lone surrogates
      ("\\ud800") that neither bcrypt nor SQLite can store
    - Values are never stripped or lowercased here

Design Decisions:
    - extra="ignore": unknown keys (e.g. a client-sent id) are dropped, so the
      id is always the one SQLite assigns
"""

from pydantic import BaseModel, ConfigDict, field_validator

from cadastro.core.domain_types import NewUser


class UserCreate(BaseModel):
    """Registration payload as received."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("name", "email", "password")
    @classmethod
    def require_utf8(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                v.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError("text must be valid UTF-8 (no lone surrogates)") from None
        return v

    def to_domain(self) -> NewUser:
        return NewUser(name=self.name, email=self.email, password=self.password)


class UserCreated(BaseModel):
    """Response body for a persisted user."""
    id: int


class ErrorResponse(BaseModel):
    """Response body for any failed request."""
    error: str
    code: str
