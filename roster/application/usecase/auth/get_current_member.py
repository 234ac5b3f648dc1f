"""Get current member use case."""

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.view import ProfileView, to_profile_view
from roster.domain.service import AccessService, ProfileService
from roster.domain.service.access_service import (
    can_access_content_studio,
    can_invite,
    can_manage_roles,
)
from roster.domain.value import FieldVisibility, IdentitySession, Role


class GetCurrentMemberRequest(BaseModel):
    """Get current member request."""

    session: IdentitySession


class Capabilities(BaseModel):
    """What the current identity may do."""

    can_invite: bool
    can_manage_roles: bool
    can_access_content_studio: bool


class GetCurrentMemberResponse(BaseModel):
    """Current identity, its profile (if registered) and roles."""

    identity_id: str
    email: str | None
    profile: ProfileView | None  # None until registration completes
    roles: list[Role]
    capabilities: Capabilities


class GetCurrentMemberUseCase(BaseUseCase):
    """Use case for describing the session's identity."""

    def __init__(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> None:
        """Initialize get current member use case.

        Args:
            profile_service: Profile domain service
            access_service: Access control domain service
        """
        self.profile_service = profile_service
        self.access_service = access_service

    async def execute(self, request: GetCurrentMemberRequest) -> GetCurrentMemberResponse:
        """Execute get current member flow.

        Args:
            request: Request with the caller's session

        Returns:
            Identity info, own profile with full visibility, roles and capabilities
        """
        session = request.session
        profile = await self.profile_service.find_by_id(session.identity_id)
        roles = await self.access_service.roles_of(session)

        return GetCurrentMemberResponse(
            identity_id=str(session.identity_id),
            email=session.email,
            profile=to_profile_view(profile, FieldVisibility.FULL) if profile else None,
            roles=sorted(roles, key=lambda r: r.value),
            capabilities=Capabilities(
                can_invite=can_invite(roles),
                can_manage_roles=can_manage_roles(roles),
                can_access_content_studio=can_access_content_studio(roles),
            ),
        )
