"""Get profile use case."""

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.common import parse_profile_id
from roster.application.usecase.profile.view import ProfileView, to_profile_view
from roster.domain.service import AccessService, ProfileService
from roster.domain.value import IdentitySession


class GetProfileRequest(BaseModel):
    """Get profile request."""

    session: IdentitySession
    profile_id: str


class GetProfileUseCase(BaseUseCase):
    """Use case for reading one directory entry."""

    def __init__(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
            access_service: Access control domain service
        """
        self.profile_service = profile_service
        self.access_service = access_service

    async def execute(self, request: GetProfileRequest) -> ProfileView:
        """Get a profile with private contact fields withheld where required.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.get_by_id(parse_profile_id(request.profile_id))
        visibility = await self.access_service.visible_fields(request.session, profile)
        return to_profile_view(profile, visibility)
