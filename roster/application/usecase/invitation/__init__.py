"""Invitation use cases."""

from roster.application.usecase.invitation.complete_registration import (
    CompleteRegistrationRequest,
    CompleteRegistrationResponse,
    CompleteRegistrationUseCase,
)
from roster.application.usecase.invitation.invite_member import (
    InviteMemberRequest,
    InviteMemberResponse,
    InviteMemberUseCase,
)
from roster.application.usecase.invitation.verify_invitation import (
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)

__all__ = [
    "CompleteRegistrationRequest",
    "CompleteRegistrationResponse",
    "CompleteRegistrationUseCase",
    "InviteMemberRequest",
    "InviteMemberResponse",
    "InviteMemberUseCase",
    "VerifyInvitationRequest",
    "VerifyInvitationResponse",
    "VerifyInvitationUseCase",
]
