"""Update profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.profile.common import parse_profile_id
from roster.application.usecase.profile.view import ProfileView, to_profile_view
from roster.application.usecase.validation import blank_to_none, parse_public_role
from roster.domain.error import ValidationError
from roster.domain.service import AccessService, ProfileService
from roster.domain.service.access_service import (
    can_change_contact_visibility,
    can_change_public_role,
    visible_fields,
)
from roster.domain.value import IdentitySession

# Optional text fields an editor may set or clear
EDITABLE_TEXT_FIELDS = (
    "phone",
    "state",
    "organization",
    "current_projects",
    "duties_and_responsibilities",
    "biography",
    "linkedin",
    "profile_photo_url",
)


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only fields present in the request are applied; an explicit null clears
    an optional field. Email is owned by the identity platform and cannot be
    changed here.
    """

    session: IdentitySession
    profile_id: str
    full_name: str | None = Field(default=None, max_length=255)
    public_role: str | None = None
    phone: str | None = None
    state: str | None = None
    organization: str | None = None
    current_projects: str | None = None
    duties_and_responsibilities: str | None = None
    biography: str | None = None
    linkedin: str | None = None
    profile_photo_url: str | None = None
    contact_visibility: bool | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    profile: ProfileView
    ignored_fields: list[str]  # Fields the editor was not allowed to change


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing a directory entry.

    Owners and admins may edit. Only admins may change ``public_role``; a
    non-admin's change to it is ignored while the rest of the edit is saved.
    Only the owner may change ``contact_visibility``.
    """

    def __init__(
        self, profile_service: ProfileService, access_service: AccessService
    ) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
            access_service: Access control domain service
        """
        self.profile_service = profile_service
        self.access_service = access_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the profile does not exist
            AuthorizationError: If the caller is neither owner nor admin
            ValidationError: If full name is blank or public role unknown
        """
        viewer_id = request.session.identity_id
        provided = request.model_fields_set - {"session", "profile_id"}

        with logfire.span(
            "update_profile",
            viewer_id=str(viewer_id),
            profile_id=request.profile_id,
        ):
            profile = await self.profile_service.get_by_id(
                parse_profile_id(request.profile_id)
            )
            roles = await self.access_service.require_edit(request.session, profile)

            updates: dict = {}
            ignored: list[str] = []

            if "full_name" in provided:
                full_name = (request.full_name or "").strip()
                if not full_name:
                    raise ValidationError("Full name is required")
                updates["full_name"] = full_name

            for field in EDITABLE_TEXT_FIELDS:
                if field in provided:
                    updates[field] = blank_to_none(getattr(request, field))

            if "public_role" in provided and request.public_role is not None:
                public_role = parse_public_role(request.public_role)
                if public_role != profile.public_role:
                    if can_change_public_role(roles):
                        updates["public_role"] = public_role
                    else:
                        ignored.append("public_role")

            if "contact_visibility" in provided and request.contact_visibility is not None:
                if request.contact_visibility != profile.contact_visibility:
                    if can_change_contact_visibility(viewer_id, profile):
                        updates["contact_visibility"] = request.contact_visibility
                    else:
                        ignored.append("contact_visibility")

            if ignored:
                logfire.info(
                    "Profile edit fields ignored",
                    viewer_id=str(viewer_id),
                    profile_id=str(profile.id),
                    fields=ignored,
                )

            if updates:
                updates["updated_at"] = datetime.now()
                profile = await self.profile_service.save(profile.model_copy(update=updates))

            visibility = visible_fields(viewer_id, roles, profile)
            return UpdateProfileResponse(
                profile=to_profile_view(profile, visibility),
                ignored_fields=ignored,
            )
