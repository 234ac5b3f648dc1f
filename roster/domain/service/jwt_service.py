"""Session token domain service."""

from uuid import UUID

import logfire

from roster.config import AuthSettings
from roster.domain.value import IdentityId, IdentitySession
from roster.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning identity platform access tokens into sessions."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, identity_id: IdentityId, email: str | None) -> str:
        """Create an access token for an identity.

        Args:
            identity_id: Identity ID
            email: Verified email for the session

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", identity_id=str(identity_id)):
            return create_token(str(identity_id), email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("Access token verified", identity_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("Access token verification failed", error=str(e))
                raise

    def session_from_token(self, token: str) -> IdentitySession:
        """Build an explicit session object from an access token.

        Args:
            token: Bearer access token

        Returns:
            Identity session carrying the identity ID, verified email and token

        Raises:
            JWTError: If token is invalid, expired, or its subject is not an ID
        """
        payload = self.verify_token(token)
        try:
            identity_id = IdentityId(UUID(payload.sub))
        except ValueError:
            raise JWTError("Invalid token subject")
        return IdentitySession(
            identity_id=identity_id,
            email=payload.email,
            access_token=token,
        )
