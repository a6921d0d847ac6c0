"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated.
"""

import base64
import hashlib
from functools import lru_cache

import bcrypt


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Return True if password matches password_hash. Malformed hashes never match."""
    try:
        return bool(bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8")))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_hash() -> str:
    """Valid hash compared against when the email is unknown, so both login failures cost one bcrypt check."""
    return hash_password("not-a-real-password")


class BcryptPasswordHasher:
    """IPasswordHasher backed by hash_password / check_password."""

    def hash(self, password: str) -> str:
        return hash_password(password)

    def check(self, password: str, password_hash: str) -> bool:
        return check_password(password, password_hash)

    def dummy_hash(self) -> str:
        return dummy_hash()
