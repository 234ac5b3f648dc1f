"""Member directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel, Field

from roster.application.usecase.profile import (
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    ProfileView,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from roster.application.usecase.role import (
    UpdateRoleRequest,
    UpdateRoleResponse,
    UpdateRoleUseCase,
)
from roster.application.usecase.validation import parse_public_role
from roster.domain.service import JWTService
from roster.interface.api.session import require_session

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing a profile. Omitted fields are left unchanged."""

    full_name: str | None = Field(default=None, max_length=255)
    public_role: str | None = None
    phone: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=100)
    organization: str | None = Field(default=None, max_length=255)
    current_projects: str | None = None
    duties_and_responsibilities: str | None = None
    biography: str | None = None
    linkedin: str | None = None
    profile_photo_url: str | None = None
    contact_visibility: bool | None = None


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    jwt_service: FromDishka[JWTService],
    search: str | None = None,
    public_role: str | None = None,
    state: str | None = None,
    authorization: str | None = Header(default=None),
) -> ListProfilesResponse:
    """List the member directory ordered by name.

    Example:
        GET /profiles?search=jane&public_role=alumni
        Authorization: Bearer <access token>
    """
    session = require_session(authorization, jwt_service)
    return await list_profiles_use_case.execute(
        ListProfilesRequest(
            session=session,
            search=search,
            public_role=parse_public_role(public_role) if public_role else None,
            state=state,
        )
    )


@router.get("/{profile_id}", response_model=ProfileView)
async def get_profile(
    profile_id: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ProfileView:
    """Get one directory entry; email and phone are withheld when restricted."""
    session = require_session(authorization, jwt_service)
    return await get_profile_use_case.execute(
        GetProfileRequest(session=session, profile_id=profile_id)
    )


@router.patch("/{profile_id}", response_model=UpdateProfileResponse)
async def update_profile(
    profile_id: str,
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Edit a profile (owner or admin).

    Example:
        PATCH /profiles/123e4567-e89b-12d3-a456-426614174000
        Authorization: Bearer <access token>

        Request:
        {
            "organization": "Example Labs",
            "public_role": "president"
        }

        Response (non-admin owner):
        {
            "profile": {..., "organization": "Example Labs", "public_role": "alumni"},
            "ignored_fields": ["public_role"]
        }
    """
    session = require_session(authorization, jwt_service)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            session=session,
            profile_id=profile_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{profile_id}", response_model=DeleteProfileResponse)
async def delete_profile(
    profile_id: str,
    delete_profile_use_case: FromDishka[DeleteProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteProfileResponse:
    """Delete a member, their roles and their identity (admins, not self)."""
    session = require_session(authorization, jwt_service)
    return await delete_profile_use_case.execute(
        DeleteProfileRequest(session=session, profile_id=profile_id)
    )


@router.put("/{profile_id}/roles/{role}", response_model=UpdateRoleResponse)
async def grant_role(
    profile_id: str,
    role: str,
    update_role_use_case: FromDishka[UpdateRoleUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateRoleResponse:
    """Grant admin or blogger to a member (admins only)."""
    session = require_session(authorization, jwt_service)
    return await update_role_use_case.execute(
        UpdateRoleRequest(session=session, profile_id=profile_id, role=role, grant=True)
    )


@router.delete("/{profile_id}/roles/{role}", response_model=UpdateRoleResponse)
async def revoke_role(
    profile_id: str,
    role: str,
    update_role_use_case: FromDishka[UpdateRoleUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateRoleResponse:
    """Revoke admin or blogger from a member (admins only)."""
    session = require_session(authorization, jwt_service)
    return await update_role_use_case.execute(
        UpdateRoleRequest(
            session=session, profile_id=profile_id, role=role, grant=False
        )
    )
