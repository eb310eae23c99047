"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; core rules that run before them stay sync
"""

from typing import Protocol

from cadastro.core.domain_types import NewUser, UserId


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def persist(self, user: NewUser, password_hash: str) -> UserId: ...


class PasswordHasher(Protocol):
    """Contract for one-way password hashing — implemented by shell."""
    def hash(self, password: str) -> str: ...
