"""Password hashing tests — bcrypt hashes checked with bcrypt.checkpw."""

import bcrypt

from cadastro.infrastructure.password_hashing import BcryptPasswordHasher


def _matches(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8")[:72], hashed.encode("ascii"))


def test_hash_is_not_plaintext_and_matches():
    hashed = BcryptPasswordHasher(rounds=4).hash("secret1")
    assert hashed != "secret1"
    assert hashed.startswith("$2")
    assert _matches("secret1", hashed)


def test_wrong_password_does_not_match():
    hashed = BcryptPasswordHasher(rounds=4).hash("secret1")
    assert not _matches("secret2", hashed)


def test_same_password_gets_different_salts():
    hasher = BcryptPasswordHasher(rounds=4)
    assert hasher.hash("secret1") != hasher.hash("secret1")


def test_hash_uses_configured_rounds():
    hashed = BcryptPasswordHasher(rounds=5).hash("secret1")
    assert hashed.split("$")[2] == "05"


def test_long_passwords_hash_without_error():
    password = "é" * 100
    assert _matches(password, BcryptPasswordHasher(rounds=4).hash(password))
