"""Password Hashing — salted bcrypt hashes for the users.password column.

Invariants:
    - hash() output always differs from its input and embeds its own salt

Design Decisions:
    - bcrypt: per-hash salt and tunable cost, no extra columns needed
    - Input truncated to 72 bytes explicitly: bcrypt ignores the rest, and recent
      releases raise instead of truncating silently
"""

import bcrypt

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """PasswordHasher implementation backed by the bcrypt library."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("ascii")
