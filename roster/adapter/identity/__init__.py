"""Identity platform adapter."""

from .client import (
    IdentityAlreadyRegisteredError,
    IdentityPlatformClient,
    IdentityPlatformError,
    InviteDispatch,
    MockIdentityPlatformClient,
    RealIdentityPlatformClient,
)

__all__ = [
    "IdentityAlreadyRegisteredError",
    "IdentityPlatformClient",
    "IdentityPlatformError",
    "InviteDispatch",
    "MockIdentityPlatformClient",
    "RealIdentityPlatformClient",
]
