"""Session token utilities.

The identity platform signs access tokens with a shared HS256 secret. The
``sub`` claim is the identity id and ``email`` is the verified address the
session was established for.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from roster.config import AuthSettings


class TokenPayload(BaseModel):
    """Access token payload."""

    sub: str
    email: str | None = None
    aud: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(identity_id: str, email: str | None, settings: AuthSettings) -> str:
    """Create an access token for an identity.

    Production tokens come from the identity platform; this is used by the
    mock platform client and in tests.

    Args:
        identity_id: Identity ID (``sub`` claim)
        email: Verified email of the session
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expiry_minutes)

    payload = {
        "sub": identity_id,
        "email": email,
        "aud": settings.jwt_audience,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
