"""Security: JWT token service and password hashing."""

from taskboard.infrastructure.security.jwt import (
    JWTTokenService,
    create_access_token,
    verify_token,
)
from taskboard.infrastructure.security.password import (
    BcryptPasswordHasher,
    check_password,
    dummy_hash,
    hash_password,
)

__all__ = [
    "BcryptPasswordHasher",
    "JWTTokenService",
    "check_password",
    "create_access_token",
    "dummy_hash",
    "hash_password",
    "verify_token",
]
