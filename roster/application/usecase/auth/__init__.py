"""Auth use cases."""

from roster.application.usecase.auth.check_studio_access import (
    CheckStudioAccessRequest,
    CheckStudioAccessResponse,
    CheckStudioAccessUseCase,
)
from roster.application.usecase.auth.get_current_member import (
    Capabilities,
    GetCurrentMemberRequest,
    GetCurrentMemberResponse,
    GetCurrentMemberUseCase,
)
from roster.application.usecase.auth.set_password import (
    SetPasswordRequest,
    SetPasswordResponse,
    SetPasswordUseCase,
)

__all__ = [
    "Capabilities",
    "CheckStudioAccessRequest",
    "CheckStudioAccessResponse",
    "CheckStudioAccessUseCase",
    "GetCurrentMemberRequest",
    "GetCurrentMemberResponse",
    "GetCurrentMemberUseCase",
    "SetPasswordRequest",
    "SetPasswordResponse",
    "SetPasswordUseCase",
]
