"""Test configuration and helpers."""

from uuid import uuid4

from roster.domain.model import MemberDetails, Profile
from roster.domain.repository import ProfileRepository
from roster.domain.value import Email, IdentityId, IdentitySession, PublicRole


def make_details(full_name: str = "Jane Doe", **overrides) -> MemberDetails:
    """Build member details with sensible defaults."""
    values = {
        "full_name": full_name,
        "public_role": PublicRole.ALUMNI,
        "phone": "555-0100",
        "state": "CA",
        "organization": "Example Labs",
    }
    values.update(overrides)
    return MemberDetails(**values)


def make_profile(
    email: str = "jane@example.org",
    identity_id: IdentityId | None = None,
    **overrides,
) -> Profile:
    """Build a profile with sensible defaults."""
    values = {
        "id": identity_id or IdentityId(uuid4()),
        "email": Email(email),
        "full_name": "Jane Doe",
        "public_role": PublicRole.ALUMNI,
        "phone": "555-0100",
        "state": "CA",
        "organization": "Example Labs",
    }
    values.update(overrides)
    return Profile(**values)


def make_session(
    email: str | None = "someone@example.org",
    identity_id: IdentityId | None = None,
) -> IdentitySession:
    """Build an identity session without a token."""
    return IdentitySession(identity_id=identity_id or IdentityId(uuid4()), email=email)


async def store_profile(container, profile: Profile) -> Profile:
    """Put a profile straight into the in-memory repository, skipping registration."""
    profile_repo = await container.get(ProfileRepository)
    profile_repo._profiles[profile.id] = profile
    return profile
