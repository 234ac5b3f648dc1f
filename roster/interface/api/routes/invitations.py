"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from roster.application.usecase.invitation import (
    CompleteRegistrationRequest,
    CompleteRegistrationResponse,
    CompleteRegistrationUseCase,
    InviteMemberRequest,
    InviteMemberResponse,
    InviteMemberUseCase,
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)
from roster.domain.service import JWTService
from roster.interface.api.session import require_session

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class InviteMemberAPIRequest(BaseModel):
    """API request for inviting a member.

    Missing fields default to empty so the caller is authenticated and
    authorized before the use case validates them.
    """

    email: str = Field(default="", max_length=320)
    full_name: str = Field(default="", max_length=255)
    public_role: str = ""
    phone: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=100)
    organization: str | None = Field(default=None, max_length=255)
    current_projects: str | None = None
    duties_and_responsibilities: str | None = None
    biography: str | None = None
    linkedin: str | None = None


class EmailAPIRequest(BaseModel):
    """API request carrying only an email."""

    email: str = Field(default="", max_length=320)


@router.post("", response_model=InviteMemberResponse)
async def invite_member(
    request: InviteMemberAPIRequest,
    invite_member_use_case: FromDishka[InviteMemberUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> InviteMemberResponse:
    """Invite a member by email (admins only).

    Stores the invitation and asks the identity platform to email an invite
    link that lands on the frontend's set-password page.

    Example:
        POST /invitations
        Authorization: Bearer <admin access token>

        Request:
        {
            "email": "jane@example.org",
            "full_name": "Jane Doe",
            "public_role": "alumni",
            "state": "CA"
        }

        Response:
        {
            "success": true,
            "email": "jane@example.org",
            "public_role": "alumni",
            "already_registered": false
        }
    """
    session = require_session(authorization, jwt_service)
    return await invite_member_use_case.execute(
        InviteMemberRequest(session=session, **request.model_dump())
    )


@router.post("/verify", response_model=VerifyInvitationResponse)
async def verify_invitation(
    request: EmailAPIRequest,
    verify_invitation_use_case: FromDishka[VerifyInvitationUseCase],
) -> VerifyInvitationResponse:
    """Check whether an invitation is pending for an email.

    Unauthenticated. Returns only a boolean.
    """
    return await verify_invitation_use_case.execute(
        VerifyInvitationRequest(email=request.email)
    )


@router.post("/complete", response_model=CompleteRegistrationResponse)
async def complete_registration(
    request: EmailAPIRequest,
    complete_registration_use_case: FromDishka[CompleteRegistrationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CompleteRegistrationResponse:
    """Consume the caller's invitation into a profile and member role.

    Requires the session the identity platform established after the
    invitee followed their link. Safe to retry.
    """
    session = require_session(authorization, jwt_service)
    return await complete_registration_use_case.execute(
        CompleteRegistrationRequest(session=session, email=request.email)
    )
