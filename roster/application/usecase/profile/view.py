"""Profile read model with visibility applied."""

from datetime import datetime

from pydantic import BaseModel

from roster.domain.model import Profile
from roster.domain.value import FieldVisibility, PublicRole


class ProfileView(BaseModel):
    """Profile as seen by one viewer.

    ``email`` and ``phone`` are None when the viewer's visibility is
    restricted.
    """

    id: str
    full_name: str
    email: str | None
    phone: str | None
    public_role: PublicRole
    state: str | None
    organization: str | None
    current_projects: str | None
    duties_and_responsibilities: str | None
    biography: str | None
    linkedin: str | None
    profile_photo_url: str | None
    contact_visibility: bool
    visibility: FieldVisibility
    created_at: datetime
    updated_at: datetime


def to_profile_view(profile: Profile, visibility: FieldVisibility) -> ProfileView:
    """Project a profile through the viewer's visibility."""
    full = visibility == FieldVisibility.FULL
    return ProfileView(
        id=str(profile.id),
        full_name=profile.full_name,
        email=profile.email.root if full else None,
        phone=profile.phone if full else None,
        public_role=profile.public_role,
        state=profile.state,
        organization=profile.organization,
        current_projects=profile.current_projects,
        duties_and_responsibilities=profile.duties_and_responsibilities,
        biography=profile.biography,
        linkedin=profile.linkedin,
        profile_photo_url=profile.profile_photo_url,
        contact_visibility=profile.contact_visibility,
        visibility=visibility,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )
