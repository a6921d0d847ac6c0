"""User API schemas (responses only; users never expose password_hash)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from taskboard.shared.enums import Role


class UserOut(BaseModel):
    """Public user representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: Role
    created_at: datetime | None = None


class UserData(BaseModel):
    user: UserOut


class UsersData(BaseModel):
    users: list[UserOut]
