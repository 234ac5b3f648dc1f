"""Complete registration use case."""

import logfire
from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.application.usecase.validation import parse_email
from roster.domain.error import (
    AuthorizationError,
    NotFoundError,
    TransientError,
    ValidationError,
)
from roster.domain.service import InvitationService, ProfileService, RoleService
from roster.domain.value import IdentitySession, Role


class CompleteRegistrationRequest(BaseModel):
    """Request to complete registration for the session's identity."""

    session: IdentitySession
    email: str


class CompleteRegistrationResponse(BaseModel):
    """Registration completion result."""

    success: bool
    profile_id: str


class CompleteRegistrationUseCase(BaseUseCase):
    """Use case converting a pending invitation into a profile and member role.

    Safe to call any number of times for the same identity. Writes happen in
    the order profile, role, invitation delete, so an interrupted call
    leaves state that the next call repairs.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        profile_service: ProfileService,
        role_service: RoleService,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            profile_service: Profile domain service
            role_service: Role domain service
        """
        self.invitation_service = invitation_service
        self.profile_service = profile_service
        self.role_service = role_service

    async def execute(
        self, request: CompleteRegistrationRequest
    ) -> CompleteRegistrationResponse:
        """Execute complete registration flow.

        Steps:
        1. Require a verified session email matching the requested email
        2. Look up the invitation; without one, succeed only for a retry
           whose profile already exists
        3. Insert or refresh the profile from the invitation
        4. Grant the member role
        5. Delete the invitation, ignoring failures

        Args:
            request: Request with the caller's session and email

        Returns:
            Success response carrying the profile ID

        Raises:
            ValidationError: If the session has no verified email
            AuthorizationError: If the email belongs to someone else
            NotFoundError: If there is neither an invitation nor a profile
            TransientError: If the profile or role write fails
        """
        session = request.session
        identity_id = session.identity_id

        verified_email = session.verified_email
        if verified_email is None:
            raise ValidationError("Session has no verified email")

        email = parse_email(request.email)
        if email != verified_email:
            logfire.warn(
                "Registration email does not match session",
                identity_id=str(identity_id),
            )
            raise AuthorizationError(f"complete registration for {email}", str(identity_id))

        with logfire.span(
            "complete_registration", identity_id=str(identity_id), email=email.root
        ):
            invitation = await self.invitation_service.get(email)

            if invitation is None:
                profile = await self.profile_service.find_by_id(identity_id)
                if profile is None:
                    raise NotFoundError("Invitation", email.root)
                # Invitation already consumed by an earlier call
                await self.role_service.grant(identity_id, Role.MEMBER)
                logfire.info("Registration already complete", identity_id=str(identity_id))
                return CompleteRegistrationResponse(success=True, profile_id=str(profile.id))

            # TransientError here stops before role and delete
            profile = await self.profile_service.upsert_from_invitation(
                identity_id, invitation
            )
            await self.role_service.grant(identity_id, Role.MEMBER)

            try:
                await self.invitation_service.remove(email)
            except TransientError as e:
                logfire.warn(
                    "Invitation delete failed after registration",
                    email=email.root,
                    error=str(e),
                )

            logfire.info(
                "Registration completed",
                identity_id=str(identity_id),
                public_role=profile.public_role.value,
            )
            return CompleteRegistrationResponse(success=True, profile_id=str(profile.id))
