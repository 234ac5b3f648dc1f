"""Domain value objects for the member roster."""

from roster.domain.value.identifiers import (
    IdentityId,
    InvitationId,
)
from roster.domain.value.types import (
    Email,
    FieldVisibility,
    IdentitySession,
    PublicRole,
    Role,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "InvitationId",
    # Types
    "Email",
    "FieldVisibility",
    "IdentitySession",
    "PublicRole",
    "Role",
]
