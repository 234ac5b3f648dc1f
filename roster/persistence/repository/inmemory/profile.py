"""In-memory profile repository for testing."""

from datetime import datetime

from roster.domain.error import NotFoundError
from roster.domain.model import MEMBER_DETAIL_FIELDS, Invitation, Profile
from roster.domain.repository import ProfileRepository
from roster.domain.value import Email, IdentityId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[IdentityId, Profile] = {}

    async def find_by_id(self, identity_id: IdentityId) -> Profile | None:
        """Find a profile by its identity ID."""
        return self._profiles.get(identity_id)

    async def find_by_email(self, email: Email) -> Profile | None:
        """Find the profile registered under an email."""
        for profile in self._profiles.values():
            if profile.email == email:
                return profile
        return None

    async def list_all(self) -> list[Profile]:
        """List all profiles ordered by full name."""
        return sorted(self._profiles.values(), key=lambda p: (p.full_name, str(p.id)))

    async def upsert_from_invitation(
        self, identity_id: IdentityId, invitation: Invitation
    ) -> Profile:
        """Create the profile for an identity from an invitation, or refresh it."""
        details = invitation.model_dump(include=set(MEMBER_DETAIL_FIELDS))
        existing = self._profiles.get(identity_id)
        if existing:
            profile = existing.model_copy(
                update={**details, "updated_at": datetime.now()}
            )
        else:
            profile = Profile(id=identity_id, email=invitation.email, **details)
        self._profiles[identity_id] = profile
        return profile

    async def save(self, profile: Profile) -> Profile:
        """Update an existing profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        if profile.id not in self._profiles:
            raise NotFoundError("Profile", str(profile.id))
        self._profiles[profile.id] = profile
        return profile

    async def delete(self, identity_id: IdentityId) -> bool:
        """Delete a profile."""
        return self._profiles.pop(identity_id, None) is not None
