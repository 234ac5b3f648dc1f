"""List profiles use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.view import ProfileView, to_profile_view
from roster.domain.service import AccessService, ProfileService
from roster.domain.service.access_service import visible_fields
from roster.domain.value import FieldVisibility, IdentitySession, PublicRole


class ListProfilesRequest(BaseModel):
    """List profiles request."""

    session: IdentitySession
    search: str | None = None  # Matches name, organization and visible email
    public_role: PublicRole | None = None
    state: str | None = None


class ListProfilesResponse(BaseModel):
    """Directory listing."""

    profiles: list[ProfileView]
    total: int


class ListProfilesUseCase(BaseUseCase):
    """Use case for browsing the member directory."""

    def __init__(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> None:
        """Initialize list profiles use case.

        Args:
            profile_service: Profile domain service
            access_service: Access control domain service
        """
        self.profile_service = profile_service
        self.access_service = access_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """List profiles ordered by full name, filtered and projected per viewer.

        Search never matches on a field the viewer cannot see.

        Args:
            request: Listing request with optional filters

        Returns:
            Matching profiles with visibility applied
        """
        viewer_id = request.session.identity_id
        search = request.search.strip().lower() if request.search else ""
        state = request.state.strip().lower() if request.state else ""

        with logfire.span("list_profiles", viewer_id=str(viewer_id), search=search):
            roles = await self.access_service.roles_of(request.session)
            profiles = await self.profile_service.list_profiles()

            views: list[ProfileView] = []
            for profile in profiles:
                if request.public_role and profile.public_role != request.public_role:
                    continue
                if state and (profile.state or "").lower() != state:
                    continue

                visibility = visible_fields(viewer_id, roles, profile)
                if search:
                    haystack = [profile.full_name, profile.organization or ""]
                    if visibility == FieldVisibility.FULL:
                        haystack.append(profile.email.root)
                    if not any(search in value.lower() for value in haystack):
                        continue

                views.append(to_profile_view(profile, visibility))

            return ListProfilesResponse(profiles=views, total=len(views))
