"""Session extraction for API routes.

Routes read the identity platform's access token from the
``Authorization: Bearer`` header and turn it into an ``IdentitySession``
that is passed explicitly to use cases.
"""

from roster.domain.error import AuthenticationError
from roster.domain.service import JWTService
from roster.domain.value import IdentitySession
from roster.util.jwt import JWTError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an Authorization header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_session(
    authorization: str | None, jwt_service: JWTService
) -> IdentitySession:
    """Build the caller's session from the Authorization header.

    Args:
        authorization: Raw Authorization header value
        jwt_service: JWT service from DI

    Returns:
        Verified identity session

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    token = bearer_token(authorization)
    if not token:
        raise AuthenticationError()

    try:
        return jwt_service.session_from_token(token)
    except JWTError as e:
        raise AuthenticationError(str(e))
