"""User repository tests — insert and generated-id flow against real SQLite.

Invariants:
    - persist() returns a positive, strictly increasing id
    - Exactly one row per call, stored with the given hash in the password column
    - Write failures raise StorageError
"""

import pytest

from cadastro.core.domain_types import NewUser
from cadastro.core.errors import StorageError
from cadastro.services.user_repository import SqlUserRepository
from tests.services.db_helpers import count_users, fetch_users


async def test_persist_returns_generated_id(database):
    repo = SqlUserRepository(database)
    user_id = await repo.persist(
        NewUser("Alice", "alice@example.com", "secret1"), "hashed",
    )
    assert isinstance(user_id, int)
    assert user_id > 0


async def test_ids_increase(database):
    repo = SqlUserRepository(database)
    user = NewUser("Alice", "alice@example.com", "secret1")
    first = await repo.persist(user, "hashed")
    second = await repo.persist(user, "hashed")
    assert second > first


async def test_one_row_per_call_with_fields(database):
    repo = SqlUserRepository(database)
    user_id = await repo.persist(
        NewUser("Alice", "alice@example.com", "secret1"), "hashed-value",
    )
    rows = await fetch_users(database)
    assert len(rows) == 1
    row = rows[0]
    assert row.id == user_id
    assert row.name == "Alice"
    assert row.email == "alice@example.com"
    assert row.password == "hashed-value"


async def test_values_are_bound_not_interpolated(database):
    repo = SqlUserRepository(database)
    hostile = "Robert'); DROP TABLE users;--"
    await repo.persist(NewUser(hostile, "bob@example.com", "secret1"), "h")
    rows = await fetch_users(database)
    assert rows[0].name == hostile


async def test_write_failure_raises_storage_error(broken_database):
    repo = SqlUserRepository(broken_database)
    with pytest.raises(StorageError):
        await repo.persist(NewUser("Alice", "alice@example.com", "secret1"), "h")


async def test_duplicate_emails_are_separate_rows(database):
    repo = SqlUserRepository(database)
    user = NewUser("Alice", "alice@example.com", "secret1")
    await repo.persist(user, "h")
    await repo.persist(user, "h")
    assert await count_users(database) == 2
