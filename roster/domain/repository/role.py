"""Role repository interface."""

from abc import ABC, abstractmethod

from roster.domain.value import IdentityId, Role


class RoleRepository(ABC):
    """Repository for role assignments (identity -> set of roles)."""

    @abstractmethod
    async def grant(self, identity_id: IdentityId, role: Role) -> bool:
        """Add a role to an identity.

        Must be an atomic insert that ignores an existing (identity, role)
        row rather than failing on it.

        Args:
            identity_id: Identity to grant to
            role: Role to grant

        Returns:
            True if the role was newly granted, False if already held
        """
        pass

    @abstractmethod
    async def revoke(self, identity_id: IdentityId, role: Role) -> bool:
        """Remove a role from an identity.

        Args:
            identity_id: Identity to revoke from
            role: Role to revoke

        Returns:
            True if the role was removed, False if it was not held
        """
        pass

    @abstractmethod
    async def revoke_all(self, identity_id: IdentityId) -> None:
        """Remove every role held by an identity.

        Args:
            identity_id: Identity being removed
        """
        pass

    @abstractmethod
    async def has_role(self, identity_id: IdentityId, role: Role) -> bool:
        """Check whether an identity holds a role.

        Args:
            identity_id: Identity to check
            role: Role to check for

        Returns:
            True if held, False otherwise
        """
        pass

    @abstractmethod
    async def roles_of(self, identity_id: IdentityId) -> set[Role]:
        """Get all roles held by an identity.

        Args:
            identity_id: Identity to look up

        Returns:
            Set of roles (empty if none)
        """
        pass
