"""Profile repository interface."""

from abc import ABC, abstractmethod

from roster.domain.model.invitation import Invitation
from roster.domain.model.profile import Profile
from roster.domain.value import Email, IdentityId


class ProfileRepository(ABC):
    """Repository for Profile aggregate."""

    @abstractmethod
    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find a profile by its identity ID.

        Args:
            identity_id: The owning identity's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Profile | None:
        """Find the profile registered under an email.

        Args:
            email: Normalized email

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name.

        Returns:
            List of profiles
        """
        pass

    @abstractmethod
    async def upsert_from_invitation(
        self, identity_id: IdentityId, invitation: Invitation
    ) -> Profile:
        """Create the profile for an identity from an invitation, or refresh it.

        Must be a single atomic insert-or-update on the identity ID. On insert
        every invitation field is copied and ``contact_visibility`` takes its
        default. On conflict the invitation fields overwrite the existing
        ones; ``contact_visibility``, ``profile_photo_url`` and ``email`` are
        left untouched.

        Args:
            identity_id: The identity completing registration
            invitation: The invitation being consumed

        Returns:
            The stored profile
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Update an existing profile.

        Args:
            profile: Profile with updated fields

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile.

        Args:
            identity_id: The owning identity's ID

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
