"""Set password use case."""

import logfire
from pydantic import BaseModel

from roster.adapter.identity import IdentityPlatformClient, IdentityPlatformError
from roster.application.usecase.base import BaseUseCase
from roster.config import Settings
from roster.domain.error import TransientError, ValidationError
from roster.domain.value import IdentitySession


class SetPasswordRequest(BaseModel):
    """Set password request."""

    session: IdentitySession
    password: str


class SetPasswordResponse(BaseModel):
    """Set password response."""

    success: bool


class SetPasswordUseCase(BaseUseCase):
    """Use case for an invitee choosing a password after following their link."""

    def __init__(self, identity_client: IdentityPlatformClient, settings: Settings) -> None:
        """Initialize set password use case.

        Args:
            identity_client: Identity platform client
            settings: Application settings
        """
        self.identity_client = identity_client
        self.settings = settings

    async def execute(self, request: SetPasswordRequest) -> SetPasswordResponse:
        """Set the password of the session's identity.

        Raises:
            ValidationError: If the password is below the minimum length
            TransientError: If the identity platform fails
        """
        min_length = self.settings.auth.password_min_length
        if len(request.password) < min_length:
            raise ValidationError(f"Password must be at least {min_length} characters")

        with logfire.span(
            "set_password", identity_id=str(request.session.identity_id)
        ):
            try:
                await self.identity_client.update_password(
                    request.session, request.password
                )
            except IdentityPlatformError as e:
                logfire.warn("Password update failed", error=str(e))
                raise TransientError(f"Could not set password: {e}") from e

            return SetPasswordResponse(success=True)
