"""Create an admin user, or promote an existing one.

Usage:
    python -m scripts.create_admin <email> [password]
If password is omitted, a random one is printed. An existing account keeps
its password and is promoted to admin.
"""

import asyncio
import secrets
import sys

from taskboard.core.config import get_settings
from taskboard.domain.exceptions import ValidationFailedException
from taskboard.infrastructure.persistence import database
from taskboard.infrastructure.persistence.repositories import UserRepository
from taskboard.infrastructure.security.password import hash_password
from taskboard.schemas.validation import ValidationSchema, validate
from taskboard.shared.enums import Role


async def main() -> None:
    """Create or promote the admin account named on the command line."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_admin <email> [password]", file=sys.stderr)
        sys.exit(1)
    email = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else secrets.token_urlsafe(12)
    try:
        validate(ValidationSchema.REGISTER, {"email": email, "password": password})
    except ValidationFailedException as exc:
        for error in exc.errors:
            print(f"{error['field']}: {error['message']}", file=sys.stderr)
        sys.exit(1)

    settings = get_settings()
    if settings.database_create_tables:
        await database.init_models()
    database._ensure_engine()

    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                users = UserRepository(session)
                existing = await users.get_by_email(email)
                if existing is not None:
                    await users.update_role(existing.id, Role.ADMIN)
                    print(f"Promoted user {existing.id} ({email}) to admin")
                    return
                user = await users.create_user(
                    email=email,
                    password_hash=hash_password(password),
                    role=Role.ADMIN,
                )
                print(f"Created admin: {user.id} ({email})")
                if len(sys.argv) <= 2:
                    print(f"Password: {password}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
