"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationRepository
from .profile import InMemoryProfileRepository
from .role import InMemoryRoleRepository

__all__ = [
    "InMemoryInvitationRepository",
    "InMemoryProfileRepository",
    "InMemoryRoleRepository",
]
