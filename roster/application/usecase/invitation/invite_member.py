"""Invite member use case."""

import logfire
from pydantic import BaseModel

from roster.adapter.identity import (
    IdentityAlreadyRegisteredError,
    IdentityPlatformClient,
    IdentityPlatformError,
)
from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.validation import (
    blank_to_none,
    parse_email,
    parse_public_role,
)
from roster.config import Settings
from roster.domain.error import TransientError, ValidationError
from roster.domain.model import Invitation, MemberDetails
from roster.domain.service import AccessService, InvitationService, ProfileService
from roster.domain.value import IdentitySession, PublicRole


class InviteMemberRequest(BaseModel):
    """Request to invite a member."""

    session: IdentitySession  # The inviting admin
    email: str
    full_name: str
    public_role: str
    phone: str | None = None
    state: str | None = None
    organization: str | None = None
    current_projects: str | None = None
    duties_and_responsibilities: str | None = None
    biography: str | None = None
    linkedin: str | None = None


class InviteMemberResponse(BaseModel):
    """Response after inviting a member."""

    success: bool
    email: str
    public_role: PublicRole
    already_registered: bool = False  # Invite email skipped, details applied to the profile


class InviteMemberUseCase(BaseUseCase):
    """Use case for issuing an invitation.

    Commits the invitation first and only then asks the identity platform to
    send the invite email, so every sent link has a durable invitation
    behind it. A failed send removes the invitation again so no
    undiscoverable row is left behind.
    """

    def __init__(
        self,
        access_service: AccessService,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        identity_client: IdentityPlatformClient,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            access_service: Access control domain service
            invitation_service: Invitation domain service
            profile_service: Profile domain service
            identity_client: Identity platform client
            settings: Application settings
        """
        self.access_service = access_service
        self.invitation_service = invitation_service
        self.profile_service = profile_service
        self.identity_client = identity_client
        self.settings = settings

    async def execute(self, request: InviteMemberRequest) -> InviteMemberResponse:
        """Execute invite member flow.

        Steps:
        1. Require the admin role
        2. Validate email, full name and public role
        3. Upsert and commit the invitation
        4. Dispatch the invite email, removing the invitation if that fails
        5. For an invitee who already has a profile, apply the invitation to
           it and remove the invitation

        Args:
            request: Invite request with the caller's session

        Returns:
            Response with the normalized email and public role

        Raises:
            AuthorizationError: If the caller is not an admin
            ValidationError: If email, name or public role are invalid
            TransientError: If storage or the invite dispatch fails
        """
        invited_by = request.session.identity_id

        with logfire.span("invite_member", invited_by=str(invited_by)):
            await self.access_service.require_invite(request.session)

            email = parse_email(request.email)
            public_role = parse_public_role(request.public_role)
            full_name = request.full_name.strip()
            if not full_name:
                raise ValidationError("Full name is required")

            details = MemberDetails(
                full_name=full_name,
                public_role=public_role,
                phone=blank_to_none(request.phone),
                state=blank_to_none(request.state),
                organization=blank_to_none(request.organization),
                current_projects=blank_to_none(request.current_projects),
                duties_and_responsibilities=blank_to_none(
                    request.duties_and_responsibilities
                ),
                biography=blank_to_none(request.biography),
                linkedin=blank_to_none(request.linkedin),
            )

            # No dispatch if this raises
            invitation = await self.invitation_service.upsert(
                email, details, invited_by, commit=True
            )

            try:
                await self.identity_client.invite_user_by_email(
                    email.root,
                    redirect_to=self.settings.identity.invite_redirect_url,
                    data={"full_name": full_name, "public_role": public_role.value},
                )
            except IdentityAlreadyRegisteredError:
                await self._apply_to_existing_profile(invitation)
                return InviteMemberResponse(
                    success=True,
                    email=email.root,
                    public_role=public_role,
                    already_registered=True,
                )
            except IdentityPlatformError as e:
                logfire.warn("Invite dispatch failed", email=email.root, error=str(e))
                await self.invitation_service.remove(email, commit=True)
                raise TransientError(f"Could not send invitation: {e}") from e

            logfire.info(
                "Member invited", email=email.root, public_role=public_role.value
            )
            return InviteMemberResponse(
                success=True, email=email.root, public_role=public_role
            )

    async def _apply_to_existing_profile(self, invitation: Invitation) -> None:
        """Refresh a registered member's profile from a re-invite.

        An identity that registered at the platform but never completed
        registration has no profile yet; its invitation stays for completion.
        """
        profile = await self.profile_service.find_by_email(invitation.email)
        if profile is None:
            logfire.info(
                "Invitee already registered, invitation kept for completion",
                email=invitation.email.root,
            )
            return

        await self.profile_service.upsert_from_invitation(profile.id, invitation)
        await self.invitation_service.remove(invitation.email)
        logfire.info(
            "Invitee already registered, profile refreshed",
            email=invitation.email.root,
            identity_id=str(profile.id),
        )
