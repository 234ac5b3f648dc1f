"""Repository interfaces for the roster domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from roster.domain.repository.invitation import InvitationRepository
from roster.domain.repository.profile import ProfileRepository
from roster.domain.repository.role import RoleRepository

__all__ = [
    "InvitationRepository",
    "ProfileRepository",
    "RoleRepository",
]
