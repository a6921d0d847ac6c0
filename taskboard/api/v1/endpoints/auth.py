"""Auth API: register, login, current user, user listing (admin).

Bodies pass through validated_body; workflows come from the composition
root in taskboard.api.v1.dependencies.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from taskboard.api.v1.dependencies import (
    AdminAssertion,
    CurrentAssertion,
    get_identity_service,
    get_identity_service_for_write,
    validated_body,
)
from taskboard.application.dtos.user import AuthResult
from taskboard.application.use_cases.identity import IdentityService
from taskboard.schemas.auth import AuthData
from taskboard.schemas.envelope import Envelope
from taskboard.schemas.user import UserData, UserOut, UsersData
from taskboard.schemas.validation import ValidationSchema

router = APIRouter()


def _auth_data(result: AuthResult) -> AuthData:
    user = result.user
    return AuthData(
        user=UserOut(id=user.id, email=user.email, role=user.role),
        token=result.token,
    )


@router.post(
    "/register",
    response_model=Envelope[AuthData],
    response_model_exclude_unset=True,
    status_code=201,
)
async def register(
    body: Annotated[dict[str, Any], Depends(validated_body(ValidationSchema.REGISTER))],
    identity: Annotated[IdentityService, Depends(get_identity_service_for_write)],
) -> Envelope[AuthData]:
    """Create an account (role user unless admin is requested) and return a token."""
    result = await identity.register(body["email"], body["password"], body["role"])
    return Envelope.ok(message="User registered successfully", data=_auth_data(result))


@router.post(
    "/login",
    response_model=Envelope[AuthData],
    response_model_exclude_unset=True,
)
async def login(
    body: Annotated[dict[str, Any], Depends(validated_body(ValidationSchema.LOGIN))],
    identity: Annotated[IdentityService, Depends(get_identity_service)],
) -> Envelope[AuthData]:
    """Exchange email and password for a token; 401 on any mismatch."""
    result = await identity.login(body["email"], body["password"])
    return Envelope.ok(message="Login successful", data=_auth_data(result))


@router.get("/me", response_model=Envelope[UserData], response_model_exclude_unset=True)
async def me(
    assertion: CurrentAssertion,
    identity: Annotated[IdentityService, Depends(get_identity_service)],
) -> Envelope[UserData]:
    """Return the caller's stored account."""
    user = await identity.get_current_user(assertion)
    return Envelope.ok(
        data=UserData(
            user=UserOut(
                id=user.id, email=user.email, role=user.role, created_at=user.created_at
            )
        )
    )


@router.get("/users", response_model=Envelope[UsersData], response_model_exclude_unset=True)
async def list_users(
    assertion: AdminAssertion,
    identity: Annotated[IdentityService, Depends(get_identity_service)],
) -> Envelope[UsersData]:
    """List every account (admin only)."""
    users = await identity.list_users()
    return Envelope.ok(
        count=len(users),
        data=UsersData(users=[UserOut.model_validate(u) for u in users]),
    )
