"""Delete profile use case."""

import logfire
from pydantic import BaseModel

from roster.adapter.identity import IdentityPlatformClient, IdentityPlatformError
from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.common import parse_profile_id
from roster.domain.error import TransientError
from roster.domain.service import AccessService, ProfileService, RoleService
from roster.domain.value import IdentitySession


class DeleteProfileRequest(BaseModel):
    """Delete profile request."""

    session: IdentitySession
    profile_id: str


class DeleteProfileResponse(BaseModel):
    """Delete profile response."""

    success: bool
    profile_id: str


class DeleteProfileUseCase(BaseUseCase):
    """Use case for an admin removing another member.

    Removes the platform identity first, then the profile and its roles.
    Deleting an identity that is already gone is a no-op, so a failed call
    can be repeated.
    """

    def __init__(
        self,
        profile_service: ProfileService,
        role_service: RoleService,
        access_service: AccessService,
        identity_client: IdentityPlatformClient,
    ) -> None:
        """Initialize delete profile use case.

        Args:
            profile_service: Profile domain service
            role_service: Role domain service
            access_service: Access control domain service
            identity_client: Identity platform client
        """
        self.profile_service = profile_service
        self.role_service = role_service
        self.access_service = access_service
        self.identity_client = identity_client

    async def execute(self, request: DeleteProfileRequest) -> DeleteProfileResponse:
        """Execute delete profile flow.

        Raises:
            NotFoundError: If the profile does not exist
            AuthorizationError: If the caller is not an admin or targets themselves
            TransientError: If the identity platform fails
        """
        with logfire.span(
            "delete_profile",
            viewer_id=str(request.session.identity_id),
            profile_id=request.profile_id,
        ):
            profile = await self.profile_service.get_by_id(
                parse_profile_id(request.profile_id)
            )
            await self.access_service.require_delete(request.session, profile)

            try:
                await self.identity_client.delete_identity(profile.id)
            except IdentityPlatformError as e:
                logfire.warn(
                    "Identity delete failed", profile_id=str(profile.id), error=str(e)
                )
                raise TransientError(f"Could not delete identity: {e}") from e

            await self.profile_service.delete(profile.id)
            await self.role_service.revoke_all(profile.id)

            return DeleteProfileResponse(success=True, profile_id=str(profile.id))
