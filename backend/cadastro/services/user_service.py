"""User Service — registration use case: check rules, hash, persist.

Invariants:
    - Rules run before any IO; a rejected payload never reaches the repository
    - The repository's id is returned unchanged
    - Plaintext passwords never leave this function except into the hasher

Design Decisions:
    - Returns CreateUserResult instead of raising for rule violations;
      StorageError is the only exception that escapes
    - Hashing runs in a worker thread: bcrypt is CPU-bound and would stall the event loop
"""

import asyncio
import logging

from cadastro.core.domain_types import CreateUserResult, NewUser
from cadastro.core.enforce_user_fields import check_new_user
from cadastro.core.repository_protocols import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Creates users after enforcing the registration rules."""

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self.repository = repository
        self.hasher = hasher

    async def create_user(self, user: NewUser) -> CreateUserResult:
        failure = check_new_user(user)
        if failure is not None:
            logger.info(
                "User rejected", extra={"error_code": failure.value},
            )
            return CreateUserResult(failure=failure)

        password_hash = await asyncio.to_thread(self.hasher.hash, user.password)
        user_id = await self.repository.persist(user, password_hash)
        logger.info("User created", extra={"user_id": user_id})
        return CreateUserResult(user_id=user_id)
