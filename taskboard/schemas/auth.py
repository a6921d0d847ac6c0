"""Auth API schemas: register/login payloads and the {user, token} response."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from taskboard.schemas.user import UserOut
from taskboard.shared.enums import Role


def _check_email(value: str) -> str:
    """Syntax check only (no DNS). The stored email keeps the caller's spelling."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError(
            "email_invalid", "Please provide a valid email address"
        ) from None
    return value


class RegisterRequest(BaseModel):
    """Request body for POST /auth/register. Unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    email: str
    password: str
    role: str = Role.USER.value

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("missing", "Password is required")
        if len(v) < 6:
            raise PydanticCustomError(
                "string_too_short", "Password must be at least 6 characters long"
            )
        return v

    @field_validator("role")
    @classmethod
    def role_is_known(cls, v: str) -> str:
        if v not in Role.values():
            raise PydanticCustomError("enum", "Role must be either user or admin")
        return v


class LoginRequest(BaseModel):
    """Request body for POST /auth/login. No password length check on login."""

    model_config = ConfigDict(extra="ignore")

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("missing", "Password is required")
        return v


class AuthData(BaseModel):
    """data of register/login responses."""

    user: UserOut
    token: str
