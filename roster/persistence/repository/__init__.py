"""PostgreSQL repository implementations."""

from roster.persistence.repository.invitation import PostgresInvitationRepository
from roster.persistence.repository.profile import PostgresProfileRepository
from roster.persistence.repository.role import PostgresRoleRepository

__all__ = [
    "PostgresInvitationRepository",
    "PostgresProfileRepository",
    "PostgresRoleRepository",
]
