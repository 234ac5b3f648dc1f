"""Domain layer DI providers."""

from dishka import Scope, provide

from roster.config import AuthSettings
from roster.domain.repository import (
    InvitationRepository,
    ProfileRepository,
    RoleRepository,
)
from roster.domain.service import (
    AccessService,
    InvitationService,
    JWTService,
    ProfileService,
    RoleService,
)
from roster.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_invitation_service(
        self, invitation_repository: InvitationRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(invitation_repository=invitation_repository)

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_role_service(self, role_repository: RoleRepository) -> RoleService:
        """Provide role domain service."""
        return RoleService(role_repository=role_repository)

    @provide
    def get_access_service(self, role_service: RoleService) -> AccessService:
        """Provide access control domain service."""
        return AccessService(role_service=role_service)
