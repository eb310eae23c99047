"""User Repository — maps a validated NewUser to one parameterized INSERT.

Invariants:
    - Exactly one row per successful persist(); nothing is read back
    - Values are bound parameters, never interpolated into SQL text
    - No validation here: callers pass users that already passed check_new_user
    - Failures surface as StorageError from Database.session()

Design Decisions:
    - ORM add + commit: the generated id is on the instance after commit
      (expire_on_commit=False), no extra SELECT needed
"""

import logging

from cadastro.core.domain_types import NewUser, UserId
from cadastro.infrastructure.database import Database
from cadastro.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by the shared Database gateway."""

    def __init__(self, database: Database):
        self.database = database

    async def persist(self, user: NewUser, password_hash: str) -> UserId:
        async with self.database.session() as db:
            row = User(name=user.name, email=user.email, password=password_hash)
            db.add(row)
            await db.commit()
            user_id = UserId(row.id)
        logger.debug("User row inserted", extra={"user_id": user_id})
        return user_id
