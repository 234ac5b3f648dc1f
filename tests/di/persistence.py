"""Mock persistence providers for testing."""

from dishka import Scope, provide

from roster.domain.repository import (
    InvitationRepository,
    ProfileRepository,
    RoleRepository,
)
from roster.persistence.repository.inmemory import (
    InMemoryInvitationRepository,
    InMemoryProfileRepository,
    InMemoryRoleRepository,
)
from roster.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests to the same container;
    each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()

    @provide(scope=Scope.APP)
    def get_role_repository(self) -> RoleRepository:
        """Provide in-memory role repository."""
        return InMemoryRoleRepository()
