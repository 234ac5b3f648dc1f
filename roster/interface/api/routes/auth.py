"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from roster.application.usecase.auth import (
    GetCurrentMemberRequest,
    GetCurrentMemberResponse,
    GetCurrentMemberUseCase,
    SetPasswordRequest,
    SetPasswordResponse,
    SetPasswordUseCase,
)
from roster.domain.service import JWTService
from roster.interface.api.session import require_session

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SetPasswordAPIRequest(BaseModel):
    """API request for setting a password."""

    password: str = ""  # Length is checked by the use case, after authentication


@router.get("/me", response_model=GetCurrentMemberResponse)
async def get_current_member(
    get_current_member_use_case: FromDishka[GetCurrentMemberUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCurrentMemberResponse:
    """Get the caller's identity, profile, roles and capabilities.

    Example:
        GET /auth/me
        Authorization: Bearer <access token>

        Response:
        {
            "identity_id": "123e4567-e89b-12d3-a456-426614174000",
            "email": "jane@example.org",
            "profile": {...},
            "roles": ["member"],
            "capabilities": {
                "can_invite": false,
                "can_manage_roles": false,
                "can_access_content_studio": false
            }
        }
    """
    session = require_session(authorization, jwt_service)
    return await get_current_member_use_case.execute(
        GetCurrentMemberRequest(session=session)
    )


@router.post("/password", response_model=SetPasswordResponse)
async def set_password(
    request: SetPasswordAPIRequest,
    set_password_use_case: FromDishka[SetPasswordUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SetPasswordResponse:
    """Set the password for the current session's identity."""
    session = require_session(authorization, jwt_service)
    return await set_password_use_case.execute(
        SetPasswordRequest(session=session, password=request.password)
    )
