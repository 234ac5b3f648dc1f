"""Verify invitation use case."""

from pydantic import BaseModel

from roster.application.usecase.base import BaseUseCase
from roster.domain.error import ValidationError
from roster.domain.service import InvitationService
from roster.domain.value import Email


class VerifyInvitationRequest(BaseModel):
    """Request to check for a pending invitation."""

    email: str = ""


class VerifyInvitationResponse(BaseModel):
    """Whether a pending invitation exists. Nothing else is disclosed."""

    exists: bool


class VerifyInvitationUseCase(BaseUseCase):
    """Use case for unauthenticated invitation existence checks."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: VerifyInvitationRequest) -> VerifyInvitationResponse:
        """Check whether an invitation is pending for an email.

        A malformed address cannot have an invitation, so it reports False
        rather than an error.

        Raises:
            ValidationError: If the email is empty
        """
        if not request.email.strip():
            raise ValidationError("Email is required")

        try:
            email = Email(request.email)
        except ValueError:
            return VerifyInvitationResponse(exists=False)

        exists = await self.invitation_service.exists(email)
        return VerifyInvitationResponse(exists=exists)
