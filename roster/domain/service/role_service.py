"""Role domain service (the role store)."""

import logfire

from roster.domain.repository import RoleRepository
from roster.domain.value import IdentityId, Role

from .base import Service


class RoleService(Service):
    """Domain service for identity role assignments.

    Roles only mean something once an identity has registered; an
    identity with no roles has no special capability.
    """

    def __init__(self, role_repository: RoleRepository) -> None:
        """Initialize role service.

        Args:
            role_repository: Role repository
        """
        self.role_repository = role_repository

    async def grant(self, identity_id: IdentityId, role: Role) -> bool:
        """Grant a role. Granting a held role is a no-op.

        Args:
            identity_id: Identity to grant to
            role: Role to grant

        Returns:
            True if newly granted, False if already held
        """
        with logfire.span(
            "role_service.grant", identity_id=str(identity_id), role=role.value
        ):
            granted = await self.role_repository.grant(identity_id, role)
            if granted:
                logfire.info("Role granted", identity_id=str(identity_id), role=role.value)
            else:
                logfire.info(
                    "Role already held", identity_id=str(identity_id), role=role.value
                )
            return granted

    async def revoke(self, identity_id: IdentityId, role: Role) -> bool:
        """Revoke a role. Revoking a role that is not held is a no-op.

        Args:
            identity_id: Identity to revoke from
            role: Role to revoke

        Returns:
            True if removed, False if it was not held
        """
        with logfire.span(
            "role_service.revoke", identity_id=str(identity_id), role=role.value
        ):
            revoked = await self.role_repository.revoke(identity_id, role)
            logfire.info(
                "Role revoked" if revoked else "Role was not held",
                identity_id=str(identity_id),
                role=role.value,
            )
            return revoked

    async def revoke_all(self, identity_id: IdentityId) -> None:
        """Revoke every role of an identity.

        Args:
            identity_id: Identity being removed
        """
        with logfire.span("role_service.revoke_all", identity_id=str(identity_id)):
            await self.role_repository.revoke_all(identity_id)
            logfire.info("All roles revoked", identity_id=str(identity_id))

    async def has_role(self, identity_id: IdentityId, role: Role) -> bool:
        """Check whether an identity holds a role."""
        return await self.role_repository.has_role(identity_id, role)

    async def roles_of(self, identity_id: IdentityId) -> set[Role]:
        """Get the roles held by an identity."""
        return await self.role_repository.roles_of(identity_id)
