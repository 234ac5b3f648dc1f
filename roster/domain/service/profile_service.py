"""Profile domain service."""

import logfire

from roster.domain.error import NotFoundError
from roster.domain.model import Invitation, Profile
from roster.domain.repository import ProfileRepository
from roster.domain.value import Email, IdentityId

from .base import Service


class ProfileService(Service):
    """Domain service for member profiles."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, identity_id: IdentityId) -> Profile:
        """Get profile by identity ID.

        Args:
            identity_id: Owning identity ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If no profile exists for the identity
        """
        with logfire.span("profile_service.get_by_id", identity_id=str(identity_id)):
            profile = await self.profile_repository.find_by_id(identity_id)
            if not profile:
                logfire.warn("Profile not found", identity_id=str(identity_id))
                raise NotFoundError("Profile", str(identity_id))
            return profile

    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Get profile by identity ID, or None if registration has not completed."""
        return await self.profile_repository.find_by_id(identity_id)

    async def find_by_email(self, email: Email) -> Profile | None:
        """Get the profile registered under an email, if any."""
        return await self.profile_repository.find_by_email(email)

    async def list_profiles(self) -> list[Profile]:
        """List every profile ordered by full name."""
        with logfire.span("profile_service.list_profiles"):
            profiles = await self.profile_repository.list_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def upsert_from_invitation(
        self, identity_id: IdentityId, invitation: Invitation
    ) -> Profile:
        """Create or refresh a profile from an invitation.

        Args:
            identity_id: Identity completing registration
            invitation: Invitation being consumed

        Returns:
            Stored profile

        Raises:
            TransientError: If the write fails
        """
        with logfire.span(
            "profile_service.upsert_from_invitation",
            identity_id=str(identity_id),
            invitation_id=str(invitation.id),
        ):
            profile = await self.profile_repository.upsert_from_invitation(
                identity_id, invitation
            )
            logfire.info(
                "Profile written from invitation",
                identity_id=str(identity_id),
                public_role=profile.public_role.value,
            )
            return profile

    async def save(self, profile: Profile) -> Profile:
        """Save an updated profile."""
        with logfire.span("profile_service.save", identity_id=str(profile.id)):
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile saved", identity_id=str(saved.id))
            return saved

    async def delete(self, identity_id: IdentityId) -> None:
        """Delete a profile.

        Raises:
            NotFoundError: If no profile exists for the identity
        """
        with logfire.span("profile_service.delete", identity_id=str(identity_id)):
            deleted = await self.profile_repository.delete(identity_id)
            if not deleted:
                raise NotFoundError("Profile", str(identity_id))
            logfire.info("Profile deleted", identity_id=str(identity_id))
